"""Configuration settings for csslogo."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from csslogo.exceptions import UnknownVariantError


class CanvasProfile(str, Enum):
    """Output canvas profile.

    The two profiles are incompatible coordinate systems, not revisions of
    one another:

    - CENTERED: 240 x 240 user units with the origin at the canvas center
    - TOP_LEFT: 1000 x 1000 user units with the origin at the top-left corner
    """

    CENTERED = "centered"
    TOP_LEFT = "top-left"

    @property
    def size(self) -> int:
        """Canvas width and height in user units."""
        return 240 if self is CanvasProfile.CENTERED else 1000

    @property
    def min(self) -> float:
        """Coordinate of the top and left canvas edges."""
        return -self.size / 2 if self is CanvasProfile.CENTERED else 0

    @property
    def max(self) -> float:
        """Coordinate of the bottom and right canvas edges."""
        return self.min + self.size


class LogoConfig(BaseModel):
    """Geometry, styling and metadata of one logo document.

    Defaults reproduce the reference logo on the centered 240-unit canvas.
    Numeric fields are deliberately unconstrained: degenerate or negative
    values only produce degenerate geometry.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    w1: float = Field(default=18, description="Half-width: x of A, C, D and F")
    h1: float = Field(default=26, description="Inner half-height: y of A, C, D and F")
    h2: float = Field(default=24, description="Outer height: B and E sit at +-(h1 + h2)")
    t1: float = Field(default=12, description="Outward tension at A, C, D and F")
    t2: float = Field(default=12, description="Horizontal tension at B and E")
    t3: float = Field(default=32, description="Inward tension at C and D (S-shape only)")
    s: float = Field(default=18, description="Stroke width")
    k: float = Field(default=24, description="Kerning between letterforms")
    r: float = Field(default=42, description="Frame corner radius (0 = square corners)")
    o: float = Field(default=24, description="Frame offset from the canvas edge")
    fg: str = Field(default="white", description="Foreground (stroke) color")
    bg: str = Field(default="rebeccapurple", description="Background (fill) color")
    id: str | None = Field(default=None, description="Document identifier")
    title: str | None = Field(default=None, description="Accessible title")
    description: str | None = Field(default=None, description="Accessible description")
    profile: CanvasProfile = Field(
        default=CanvasProfile.CENTERED,
        description="Output canvas profile",
    )

    @property
    def has_metadata(self) -> bool:
        """Whether the document carries a title or description."""
        return self.title is not None or self.description is not None

    def with_overrides(self, **changes: Any) -> "LogoConfig":
        """Return a copy with the given fields replaced.

        Args:
            **changes: Field values to replace

        Returns:
            New validated configuration; self is left untouched
        """
        return self.model_validate({**self.model_dump(), **changes})

    @classmethod
    def large(cls, **changes: Any) -> "LogoConfig":
        """Defaults scaled for the 1000-unit top-left canvas."""
        values: dict[str, Any] = {
            "w1": 75,
            "h1": 108,
            "h2": 100,
            "t1": 50,
            "t2": 50,
            "t3": 133,
            "s": 75,
            "k": 100,
            "r": 175,
            "o": 100,
            "profile": CanvasProfile.TOP_LEFT,
        }
        values.update(changes)
        return cls(**values)


class LogoVariant(BaseModel):
    """A named output file rendered from the base config plus overrides."""

    model_config = ConfigDict(frozen=True)

    name: str
    filename: str
    overrides: dict[str, Any] = Field(default_factory=dict)

    @field_validator("overrides")
    @classmethod
    def _known_fields(cls, value: dict[str, Any]) -> dict[str, Any]:
        unknown = sorted(set(value) - set(LogoConfig.model_fields))
        if unknown:
            raise ValueError(f"unknown LogoConfig field(s): {', '.join(unknown)}")
        return value

    def apply(self, config: LogoConfig) -> LogoConfig:
        """Apply this variant's overrides to a base configuration."""
        return config.with_overrides(**self.overrides)


DEFAULT_VARIANTS: list[LogoVariant] = [
    LogoVariant(
        name="css",
        filename="css.svg",
        overrides={"title": "CSS"},
    ),
    LogoVariant(
        name="square",
        filename="css.square.svg",
        overrides={"r": 0, "title": "CSS"},
    ),
    LogoVariant(
        name="light",
        filename="css.light.svg",
        overrides={
            "fg": "rebeccapurple",
            "bg": "white",
            "id": "css-light",
            "title": "CSS",
            "description": "The CSS logo in rebeccapurple on a white background",
        },
    ),
    LogoVariant(
        name="dark",
        filename="css.dark.svg",
        overrides={
            "fg": "white",
            "bg": "black",
            "id": "css-dark",
            "title": "CSS",
            "description": "The CSS logo in white on a black background",
        },
    ),
]


def get_variant(name: str, variants: list[LogoVariant] | None = None) -> LogoVariant:
    """Look up a variant by name.

    Args:
        name: Variant name (e.g. "css", "square")
        variants: Variants to search (default: DEFAULT_VARIANTS)

    Returns:
        The matching variant

    Raises:
        UnknownVariantError: If no variant has that name
    """
    candidates = DEFAULT_VARIANTS if variants is None else variants
    for variant in candidates:
        if variant.name == name:
            return variant
    raise UnknownVariantError(name, [v.name for v in candidates])


# Level names accepted for console and file logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Only report errors on the console",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}' (valid: {', '.join(LOG_LEVELS)})")
        return level


class CssLogoSettings(BaseModel):
    """Main application settings."""

    logo: LogoConfig = Field(default_factory=LogoConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    variants: list[LogoVariant] = Field(default_factory=lambda: list(DEFAULT_VARIANTS))


def get_default_settings() -> CssLogoSettings:
    """Get default application settings."""
    return CssLogoSettings()
