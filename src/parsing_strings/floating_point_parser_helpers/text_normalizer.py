"""Input screening shared by all numeric converters."""

from __future__ import annotations

from typing import Optional


class TextNormalizer:
    """Turns caller input into text the platform parsers may see."""

    @staticmethod
    def to_text(value: object) -> Optional[str]:
        """
        Convert raw input to a str.

        Args:
            value: str, bytes or bytearray

        Returns:
            Decoded text, or None when the value cannot be treated as text
        """
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            try:
                return bytes(value).decode("utf-8")
            except UnicodeDecodeError:
                return None
        return None

    @staticmethod
    def is_acceptable(text: str) -> bool:
        """
        Reject syntax that Python's parsers accept but plain numeric text never carries.

        Digit-group underscores ("1_000") and non-ASCII digits are refused.
        """
        return text.isascii() and "_" not in text
