"""Configuration management for csslogo.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LogoConfig: Geometry, styling and metadata of one document
- CanvasProfile: Selectable output canvas (centered 240 or top-left 1000)
- LogoVariant: Named output file with configuration overrides
- LoggingConfig: Logging settings
- CssLogoSettings: Main application settings
"""

from csslogo.config.settings import (
    DEFAULT_VARIANTS,
    LOG_LEVELS,
    CanvasProfile,
    CssLogoSettings,
    LoggingConfig,
    LogoConfig,
    LogoVariant,
    get_default_settings,
    get_variant,
)

__all__ = [
    "DEFAULT_VARIANTS",
    "LOG_LEVELS",
    "CanvasProfile",
    "CssLogoSettings",
    "LoggingConfig",
    "LogoConfig",
    "LogoVariant",
    "get_default_settings",
    "get_variant",
]
