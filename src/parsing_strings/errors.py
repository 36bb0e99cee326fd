"""Error types raised by the numeric parsing helpers.

Exception classes support two patterns:
1. No-argument raise: raise ApplicationError()
2. Contextual attributes: err = ApplicationError(field="x", value=123); raise err
"""

from __future__ import annotations

from typing import Any


class ApplicationError(Exception):
    """Base exception for all parsing_strings errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class InvalidArgumentError(ApplicationError, ValueError):
    """An argument was missing or unusable."""

    def __init__(self, message: str = "", *, param_name: str = "", **kwargs: Any) -> None:
        if not message:
            message = f"Invalid argument: {param_name}" if param_name else "Invalid argument"
        super().__init__(message, **kwargs)
        self.param_name = param_name

    @classmethod
    def missing_value(cls, param_name: str) -> "InvalidArgumentError":
        """Create error for an absent (None) argument."""
        return cls(f"Value cannot be None (parameter {param_name!r})", param_name=param_name)


__all__ = ["ApplicationError", "InvalidArgumentError"]
