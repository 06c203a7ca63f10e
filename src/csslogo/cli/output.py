"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with a per-variant progress display, a variant table and formatted
messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
)
from rich.table import Table
from rich.text import Text

from csslogo.config import LogoVariant

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

# Width of the variant-name column in the progress display
_VARIANT_COLUMN = 10


def create_progress() -> Progress:
    """Create a progress display whose label is the variant being written.

    The task description is updated with each variant name, so the line
    reads e.g. "  dark       ━━━━━━━━━━━━━━━━━━━━ 4/4".

    Returns:
        Configured Progress instance.
    """
    return Progress(
        TextColumn(f"  {{task.description:<{_VARIANT_COLUMN}}}"),
        BarColumn(bar_width=20, complete_style="magenta", finished_style="green"),
        MofNCompleteColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str, profile: str) -> None:
    """Print the banner with version and canvas profile.

    Args:
        version: Application version string
        profile: Canvas profile name (centered or top-left)
    """
    console.print(f"\n[bold]csslogo[/bold] v{version} {SYM_DOT} [dim]{profile} canvas[/dim]")


def print_step(message: str, count: int | None = None) -> None:
    """Print a step line, optionally followed by an item count.

    Args:
        message: Step description
        count: Number of items the step covers
    """
    suffix = f" [dim]({count})[/dim]" if count is not None else ""
    console.print(f"\n{SYM_STEP} {message}{suffix}")


def print_config_info(fg: str, bg: str, radius: float) -> None:
    """Print the colors and frame radius of the base configuration."""
    line = Text("  ")
    line.append(fg, style="bold")
    line.append(f" on {bg} {SYM_DOT} ")
    line.append("square frame" if radius == 0 else f"radius {radius:g}")
    console.print(line)


def print_variants(variants: list[LogoVariant]) -> None:
    """Print a table of variants and their overrides."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Variant")
    table.add_column("File")
    table.add_column("Overrides")
    for variant in variants:
        overrides = ", ".join(f"{k}={v}" for k, v in variant.overrides.items())
        table.add_row(variant.name, variant.filename, overrides or SYM_DOT)
    console.print(table)


def _format_duration(seconds: float) -> str:
    """Generation takes milliseconds; show sub-millisecond runs as "<1ms"."""
    millis = seconds * 1000
    return "<1ms" if millis < 1 else f"{millis:.0f}ms"


def print_success(
    output_dir: str,
    files: list[str],
    total_bytes: int,
    total_time_s: float,
    verbose: bool = False,
) -> None:
    """Print success message with summary.

    Args:
        output_dir: Directory the files were written to
        files: Written file paths
        total_bytes: Total size of the written files
        total_time_s: Total generation time in seconds
        verbose: Whether to list each file
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_duration(total_time_s)}"
    )

    line = Text("  ")
    line.append(output_dir, style="bold")
    line.append(f" ({len(files)} files {SYM_DOT} {total_bytes:,} bytes)")
    console.print(line)

    if verbose:
        for path in files:
            console.print(Text(f"  {path}"))


def print_error(message: str, valid: list[str] | tuple[str, ...] | None = None) -> None:
    """Print an error, optionally listing the accepted values.

    Args:
        message: Error message
        valid: Accepted values for the offending option
    """
    console.print(f"\n[bold red]{SYM_ERR}[/bold red] {message}")
    if valid:
        console.print(f"  [dim]valid:[/dim] {', '.join(valid)}")
