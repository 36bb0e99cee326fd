"""Tagged parse outcome shared by the try-style and parse-style helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ParseStatus(Enum):
    """Why a parse attempt ended the way it did."""

    OK = "ok"
    OVERFLOW = "overflow"
    MALFORMED = "malformed"
    MISSING_INPUT = "missing_input"


@dataclass(frozen=True)
class ParseOutcome(Generic[T]):
    """Result of converting one piece of text to a number.

    ``value`` is only populated when ``status`` is ``ParseStatus.OK``.
    """

    status: ParseStatus
    value: Optional[T] = None
    text: Any = None

    @classmethod
    def success(cls, value: T, text: Any) -> "ParseOutcome[T]":
        return cls(ParseStatus.OK, value, text)

    @classmethod
    def failure(cls, status: ParseStatus, text: Any) -> "ParseOutcome[T]":
        if status is ParseStatus.OK:
            raise ValueError("failure outcome requires a non-OK status")
        return cls(status, None, text)

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK

    def value_or(self, fallback: T) -> T:
        """Return the parsed value, or *fallback* when the parse failed."""
        if self.status is ParseStatus.OK:
            return self.value  # type: ignore[return-value]
        return fallback


__all__ = ["ParseOutcome", "ParseStatus"]
