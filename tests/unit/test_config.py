"""Unit tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from csslogo.config import (
    DEFAULT_VARIANTS,
    CanvasProfile,
    CssLogoSettings,
    LoggingConfig,
    LogoConfig,
    LogoVariant,
    get_default_settings,
    get_variant,
)
from csslogo.exceptions import ConfigurationError, UnknownVariantError


class TestCanvasProfile:
    """Tests for CanvasProfile enum."""

    def test_centered(self) -> None:
        profile = CanvasProfile.CENTERED
        assert profile.size == 240
        assert profile.min == -120
        assert profile.max == 120

    def test_top_left(self) -> None:
        profile = CanvasProfile.TOP_LEFT
        assert profile.size == 1000
        assert profile.min == 0
        assert profile.max == 1000

    def test_from_string(self) -> None:
        assert CanvasProfile("top-left") is CanvasProfile.TOP_LEFT


class TestLogoConfig:
    """Tests for LogoConfig."""

    def test_defaults(self) -> None:
        config = LogoConfig()
        assert (config.w1, config.h1, config.h2) == (18, 26, 24)
        assert (config.t1, config.t2, config.t3) == (12, 12, 32)
        assert (config.s, config.k, config.r, config.o) == (18, 24, 42, 24)
        assert config.fg == "white"
        assert config.bg == "rebeccapurple"
        assert config.id is None
        assert config.title is None
        assert config.description is None
        assert config.profile is CanvasProfile.CENTERED

    def test_frozen(self) -> None:
        config = LogoConfig()
        with pytest.raises(ValidationError):
            config.w1 = 20  # type: ignore[misc]

    def test_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            LogoConfig(18, 26)  # type: ignore[misc]

    def test_unconstrained_numbers(self) -> None:
        """Degenerate and negative values are accepted."""
        config = LogoConfig(w1=0, h1=-5, r=-1000)
        assert config.h1 == -5

    def test_with_overrides(self) -> None:
        base = LogoConfig()
        changed = base.with_overrides(fg="black", r=0)
        assert changed.fg == "black"
        assert changed.r == 0
        assert base.fg == "white"
        assert base.r == 42

    def test_with_overrides_validates(self) -> None:
        with pytest.raises(ValidationError):
            LogoConfig().with_overrides(w1="wide")

    def test_with_overrides_rejects_unknown_field(self) -> None:
        """A misspelled field name is an error, not a silent default."""
        with pytest.raises(ValidationError, match="radius"):
            LogoConfig().with_overrides(radius=0)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogoConfig(forground="red")  # type: ignore[call-arg]

    def test_has_metadata(self) -> None:
        assert not LogoConfig().has_metadata
        assert not LogoConfig(id="x").has_metadata
        assert LogoConfig(title="CSS").has_metadata
        assert LogoConfig(description="logo").has_metadata

    def test_large(self) -> None:
        config = LogoConfig.large()
        assert config.profile is CanvasProfile.TOP_LEFT
        assert config.w1 == 75
        assert LogoConfig.large(fg="red").fg == "red"

    def test_profile_from_string(self) -> None:
        assert LogoConfig(profile="top-left").profile is CanvasProfile.TOP_LEFT


class TestVariants:
    """Tests for output variants."""

    def test_default_filenames(self) -> None:
        assert [v.filename for v in DEFAULT_VARIANTS] == [
            "css.svg",
            "css.square.svg",
            "css.light.svg",
            "css.dark.svg",
        ]

    def test_square_variant(self) -> None:
        assert get_variant("square").apply(LogoConfig()).r == 0

    def test_apply_keeps_geometry(self) -> None:
        """Variants change styling and metadata, not letterform geometry."""
        base = LogoConfig()
        for variant in DEFAULT_VARIANTS:
            config = variant.apply(base)
            assert (config.w1, config.h1, config.h2, config.t3) == (18, 26, 24, 32)

    def test_get_variant_unknown(self) -> None:
        with pytest.raises(UnknownVariantError) as excinfo:
            get_variant("neon")
        assert excinfo.value.name == "neon"
        assert "css" in excinfo.value.available
        assert isinstance(excinfo.value, ConfigurationError)

    def test_get_variant_custom_list(self) -> None:
        custom = [LogoVariant(name="mono", filename="mono.svg", overrides={"fg": "black"})]
        assert get_variant("mono", custom).filename == "mono.svg"
        with pytest.raises(UnknownVariantError):
            get_variant("css", custom)

    def test_variant_rejects_unknown_override(self) -> None:
        """Override keys must name LogoConfig fields."""
        with pytest.raises(ValidationError, match="colour"):
            LogoVariant(name="mono", filename="mono.svg", overrides={"colour": "black"})


class TestSettings:
    """Tests for CssLogoSettings."""

    def test_default_settings(self) -> None:
        settings = get_default_settings()
        assert isinstance(settings, CssLogoSettings)
        assert settings.logo == LogoConfig()
        assert settings.logging.log_level == "WARNING"
        assert settings.logging.log_file is None
        assert [v.name for v in settings.variants] == ["css", "square", "light", "dark"]

    def test_log_file_path(self) -> None:
        settings = CssLogoSettings(logging={"log_file": "run.log"})
        assert settings.logging.log_file == Path("run.log")


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_level_normalized(self) -> None:
        config = LoggingConfig(log_level="info", file_log_level="debug")
        assert config.log_level == "INFO"
        assert config.file_log_level == "DEBUG"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unknown log level"):
            LoggingConfig(log_level="LOUD")

    def test_quiet_default(self) -> None:
        assert LoggingConfig().quiet is False
