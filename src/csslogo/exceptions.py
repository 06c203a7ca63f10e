"""Exception hierarchy for csslogo."""


class CssLogoError(Exception):
    """Base exception for all csslogo errors."""

    pass


class ConfigurationError(CssLogoError):
    """Errors related to logo configuration."""

    pass


class UnknownVariantError(ConfigurationError):
    """Requested variant is not defined."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown variant '{name}' (available: {', '.join(available)})"
        )


class MissingTensionError(CssLogoError, ValueError):
    """A closed-curl letterform was requested without its inward tension."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Letterform '{kind}' requires the inward tension t3")


class OutputError(CssLogoError):
    """Errors related to writing generated documents."""

    pass


class LogoSaveError(OutputError):
    """Error saving a generated document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save logo '{path}': {reason}")
