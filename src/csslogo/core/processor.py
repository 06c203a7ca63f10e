"""Generation orchestration.

Renders the configured variants with the pure document assembler and hands
each result to the writer. All I/O and logging of a generation run happen
here, keeping the geometry core free of side effects.
"""

import time
from collections.abc import Callable
from pathlib import Path

from csslogo.config import (
    CssLogoSettings,
    LogoConfig,
    LogoVariant,
    get_default_settings,
    get_variant,
)
from csslogo.core.document import render_logo
from csslogo.io import LogoWriter
from csslogo.utils import GenerationStats, configure_logging


class LogoProcessor:
    """Renders and writes logo variants.

    Example:
        settings = CssLogoSettings()
        processor = LogoProcessor(settings)
        stats = processor.process(output_dir=Path("out"))
    """

    def __init__(self, settings: CssLogoSettings | None = None) -> None:
        """Initialize the processor.

        Args:
            settings: Application settings with base config and variants
                (default: get_default_settings())
        """
        if settings is None:
            settings = get_default_settings()
        self.settings = settings
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=settings.logging.quiet,
        )

    def select(self, variant_names: list[str] | None = None) -> list[LogoVariant]:
        """Resolve variant names against the configured variants.

        Args:
            variant_names: Names to select (None = all configured variants)

        Returns:
            Selected variants in the requested order

        Raises:
            UnknownVariantError: If a name is not configured
        """
        if not variant_names:
            return list(self.settings.variants)
        return [get_variant(name, self.settings.variants) for name in variant_names]

    def config_for(self, variant: LogoVariant) -> LogoConfig:
        """Base logo config with the variant's overrides applied."""
        return variant.apply(self.settings.logo)

    def render(self, variant: LogoVariant) -> str:
        """Render one variant's document."""
        config = self.config_for(variant)
        document = render_logo(config)
        self.logger.debug(
            "Variant rendered",
            variant=variant.name,
            profile=config.profile.value,
            length=len(document),
        )
        return document

    def process(
        self,
        output_dir: Path,
        variant_names: list[str] | None = None,
        progress_callback: Callable[[int, int, str], None] | None = None,
    ) -> GenerationStats:
        """Render the selected variants and write them to output_dir.

        Args:
            output_dir: Directory receiving the files
            variant_names: Variants to generate (None = all)
            progress_callback: Called as (completed, total, variant_name)
                after each file is written

        Returns:
            Statistics of the run

        Raises:
            UnknownVariantError: If a requested variant does not exist
            LogoSaveError: If a file cannot be written
        """
        variants = self.select(variant_names)
        writer = LogoWriter(output_dir)
        stats = GenerationStats(start_time=time.time())

        self.logger.info(
            "Generating logos",
            output_dir=str(writer.output_dir),
            variants=[v.name for v in variants],
        )

        for index, variant in enumerate(variants, start=1):
            document = self.render(variant)
            path = writer.write(variant.filename, document)
            size = len(document.encode("utf-8"))
            stats.record(variant.name, path, size)
            self.logger.info("Logo written", variant=variant.name, path=str(path), bytes=size)
            if progress_callback is not None:
                progress_callback(index, len(variants), variant.name)

        stats.end_time = time.time()
        self.logger.info(
            "Generation complete",
            files=stats.files_written,
            bytes=stats.bytes_written,
            duration_s=round(stats.duration_seconds, 4),
        )
        return stats
