"""CLI application entry point for csslogo.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated, Any

import typer

from csslogo import __version__
from csslogo.cli.output import (
    console,
    create_progress,
    print_config_info,
    print_error,
    print_header,
    print_step,
    print_success,
    print_variants,
)
from csslogo.config import (
    DEFAULT_VARIANTS,
    LOG_LEVELS,
    CanvasProfile,
    CssLogoSettings,
    LoggingConfig,
    LogoConfig,
)
from csslogo.core import LogoProcessor
from csslogo.exceptions import CssLogoError, LogoSaveError, UnknownVariantError
from csslogo.io import LogoWriter

# Create the Typer app
app = typer.Typer(
    name="csslogo",
    help="Generate the CSS logo as SVG documents.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]csslogo[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def generate(
    output_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory receiving the SVG files",
        ),
    ] = Path("."),
    variant: Annotated[
        list[str] | None,
        typer.Option(
            "--variant",
            "-n",
            help="Variant to generate (repeatable; default: all)",
        ),
    ] = None,
    profile: Annotated[
        str,
        typer.Option(
            "--profile",
            "-p",
            help="Canvas profile (centered|top-left)",
        ),
    ] = "centered",
    fg: Annotated[
        str | None,
        typer.Option(
            "--fg",
            help="Foreground color override",
        ),
    ] = None,
    bg: Annotated[
        str | None,
        typer.Option(
            "--bg",
            help="Background color override",
        ),
    ] = None,
    radius: Annotated[
        float | None,
        typer.Option(
            "--radius",
            "-r",
            help="Frame corner radius override (0 = square corners)",
        ),
    ] = None,
    stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Print the first selected variant to standard output instead of writing files",
        ),
    ] = False,
    list_variants: Annotated[
        bool,
        typer.Option(
            "--list-variants",
            help="List available variants and exit",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR|CRITICAL)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate the CSS logo variants as SVG files.

    By default css.svg, css.square.svg, css.light.svg and css.dark.svg are
    written to OUTPUT_DIR. Color and radius overrides apply to the base
    configuration; each variant's own overrides are applied on top.

    Example:
        csslogo out/ --variant css --profile top-left
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if list_variants:
        print_variants(DEFAULT_VARIANTS)
        raise typer.Exit(code=0)

    try:
        canvas = CanvasProfile(profile.lower())
    except ValueError:
        print_error(f"Invalid profile: {profile}", valid=[p.value for p in CanvasProfile])
        raise typer.Exit(code=1)

    if log_level.upper() not in LOG_LEVELS:
        print_error(f"Invalid log level: {log_level}", valid=LOG_LEVELS)
        raise typer.Exit(code=1)

    overrides: dict[str, Any] = {}
    if fg is not None:
        overrides["fg"] = fg
    if bg is not None:
        overrides["bg"] = bg
    if radius is not None:
        overrides["r"] = radius

    base = LogoConfig.large() if canvas is CanvasProfile.TOP_LEFT else LogoConfig()
    settings = CssLogoSettings(
        logo=base.with_overrides(**overrides),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
            quiet=quiet,
        ),
    )

    try:
        processor = LogoProcessor(settings)
        selected = processor.select(variant)

        if stdout:
            LogoWriter.write_stream(processor.render(selected[0]), sys.stdout)
            raise typer.Exit(code=0)

        if not quiet:
            print_header(__version__, canvas.value)
            logo = settings.logo
            print_config_info(logo.fg, logo.bg, logo.r)
            print_step("Writing variants", count=len(selected))

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(selected[0].name, total=len(selected))

                def update_progress(completed: int, _total: int, name: str) -> None:
                    progress.update(task_id, completed=completed, description=name)

                stats = processor.process(
                    output_dir=output_dir,
                    variant_names=variant,
                    progress_callback=update_progress,
                )
        else:
            stats = processor.process(output_dir=output_dir, variant_names=variant)

        if not quiet:
            print_success(
                output_dir=str(output_dir),
                files=[str(path) for _, path in stats.outputs],
                total_bytes=stats.bytes_written,
                total_time_s=stats.duration_seconds,
                verbose=verbose,
            )

    except UnknownVariantError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except LogoSaveError as e:
        print_error(f"Could not save logo {e.path}: {e.reason}")
        raise typer.Exit(code=1)
    except CssLogoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
