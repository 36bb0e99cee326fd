"""Binary floating point conversion on top of ``float()``."""

from __future__ import annotations

import math
from fractions import Fraction

import numpy as np

from ..outcome import ParseOutcome, ParseStatus

_INFINITY_TOKENS = frozenset({"inf", "infinity"})

# float32 rounds to infinity from halfway between FLT_MAX and 2**128
_SINGLE_OVERFLOW_EDGE = Fraction(2**128)


def _is_infinity_token(text: str) -> bool:
    token = text.strip().lower()
    if token[:1] in ("+", "-"):
        token = token[1:]
    return token in _INFINITY_TOKENS


def _exact_single(value: np.float32) -> Fraction:
    if np.isinf(value):
        return _SINGLE_OVERFLOW_EDGE if value > 0 else -_SINGLE_OVERFLOW_EDGE
    return Fraction(float(value))


def _resolve_halfway(text: str, wide: float, narrow: np.float32) -> np.float32:
    """
    Correct double rounding when *wide* sits exactly between two float32 values.

    Ties-to-even on the double is only right if the text itself is the tie;
    otherwise the text decides which neighbour is nearer.
    """
    if not math.isfinite(wide) or float(narrow) == wide:
        return narrow

    tie = Fraction(wide)
    toward = np.float32(np.inf) if _exact_single(narrow) < tie else np.float32(-np.inf)
    other = np.nextafter(narrow, toward)
    if _exact_single(narrow) + _exact_single(other) != 2 * tie:
        return narrow

    exact = Fraction(text.strip())
    if exact == tie:
        return narrow
    if (exact > tie) == (_exact_single(other) > _exact_single(narrow)):
        return other
    return narrow


def convert_double(text: str) -> ParseOutcome[float]:
    """Parse *text* as a 64-bit float; finite text that rounds to infinity overflows."""
    try:
        value = float(text)
    except ValueError:
        return ParseOutcome.failure(ParseStatus.MALFORMED, text)

    if math.isinf(value) and not _is_infinity_token(text):
        return ParseOutcome.failure(ParseStatus.OVERFLOW, text)
    return ParseOutcome.success(value, text)


def convert_single(text: str) -> ParseOutcome[np.float32]:
    """Parse *text* as the nearest 32-bit float."""
    wide = convert_double(text)
    if not wide.ok:
        return ParseOutcome.failure(wide.status, text)

    value = float(wide.value)  # type: ignore[arg-type]
    with np.errstate(over="ignore"):
        narrow = _resolve_halfway(text, value, np.float32(value))

    if np.isinf(narrow) and not math.isinf(value):
        return ParseOutcome.failure(ParseStatus.OVERFLOW, text)
    return ParseOutcome.success(narrow, text)
