"""Exception types for configuration handling."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a PARSING_STRINGS_* setting holds an unusable value."""

    def __init__(self, message: str = "", *, setting: str = "") -> None:
        super().__init__(message or f"Invalid setting {setting}")
        self.setting = setting

    @classmethod
    def invalid_setting(cls, setting: str, raw: object, expected: str) -> "ConfigurationError":
        """Create error for a setting that does not hold the expected kind of value."""
        return cls(f"{setting} must be {expected} (got {raw!r})", setting=setting)


__all__ = ["ConfigurationError"]
