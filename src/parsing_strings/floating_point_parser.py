"""
Text to number conversion with try-style and parse-style entry points.

Every conversion first produces a ParseOutcome; the public helpers are thin
projections over it:

- try_parse_*: return ``(success, value)`` and never raise. ``value`` is zero
  on failure.
- parse_*: return the value, or a type-specific sentinel on failure. Passing
  None raises InvalidArgumentError.

Sentinels differ per target and are kept for compatibility with existing
callers:

- parse_float: NaN
- parse_double: DOUBLE_EPSILON (smallest positive subnormal double)
- parse_decimal: -2.2 on overflow, -1.1 on any other failure

Callers that need to tell failures apart should use the *_outcome functions.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any, Callable, Optional, Tuple, TypeVar

import numpy as np

from .decimal_limits import DEFAULT_DECIMAL_LIMITS, DecimalLimits
from .errors import InvalidArgumentError
from .floating_point_parser_helpers import TextNormalizer, convert_decimal, convert_double, convert_single
from .outcome import ParseOutcome, ParseStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")

FLOAT_SENTINEL = np.float32(np.nan)
DOUBLE_EPSILON = math.ulp(0.0)
DECIMAL_OVERFLOW_SENTINEL = Decimal("-2.2")
DECIMAL_MALFORMED_SENTINEL = Decimal("-1.1")

_PARAM_NAME = "text"


def _run(text: Any, convert: Callable[[str], ParseOutcome[T]]) -> ParseOutcome[T]:
    if text is None:
        return ParseOutcome.failure(ParseStatus.MISSING_INPUT, text)

    normalized = TextNormalizer.to_text(text)
    if normalized is None or not TextNormalizer.is_acceptable(normalized):
        return ParseOutcome.failure(ParseStatus.MALFORMED, text)

    outcome = convert(normalized)
    if not outcome.ok:
        return ParseOutcome.failure(outcome.status, text)
    return outcome


def _log_failure(operation: str, outcome: ParseOutcome[Any]) -> None:
    logger.debug("%s failed (%s) for %r", operation, outcome.status.value, outcome.text)


def _require_text(operation: str, outcome: ParseOutcome[Any]) -> None:
    if outcome.status is ParseStatus.MISSING_INPUT:
        logger.debug("%s called with None", operation)
        raise InvalidArgumentError.missing_value(_PARAM_NAME)


def parse_float_outcome(text: Any) -> ParseOutcome[np.float32]:
    """Convert *text* to a 32-bit float, reporting failures as a status."""
    return _run(text, convert_single)


def parse_double_outcome(text: Any) -> ParseOutcome[float]:
    """Convert *text* to a 64-bit float, reporting failures as a status."""
    return _run(text, convert_double)


def parse_decimal_outcome(text: Any, *, limits: DecimalLimits = DEFAULT_DECIMAL_LIMITS) -> ParseOutcome[Decimal]:
    """Convert *text* to a bounded Decimal, reporting failures as a status."""
    return _run(text, lambda normalized: convert_decimal(normalized, limits))


def try_parse_float(text: Optional[str]) -> Tuple[bool, np.float32]:
    """
    Convert text to its single-precision floating point equivalent.

    Args:
        text: Text representing a number

    Returns:
        ``(True, value)`` when the conversion succeeded, otherwise ``(False, 0.0)``
    """
    outcome = parse_float_outcome(text)
    if not outcome.ok:
        _log_failure("try_parse_float", outcome)
    return outcome.ok, outcome.value_or(np.float32(0.0))


def parse_float(text: Optional[str]) -> np.float32:
    """
    Convert text to its single-precision floating point equivalent.

    Args:
        text: Text containing a number

    Returns:
        The parsed value, or NaN if the text is malformed or out of range

    Raises:
        InvalidArgumentError: If text is None
    """
    outcome = parse_float_outcome(text)
    _require_text("parse_float", outcome)
    if not outcome.ok:
        _log_failure("parse_float", outcome)
    return outcome.value_or(FLOAT_SENTINEL)


def try_parse_double(text: Optional[str]) -> Tuple[bool, float]:
    """
    Convert text to its double-precision floating point equivalent.

    Args:
        text: Text representing a number

    Returns:
        ``(True, value)`` when the conversion succeeded, otherwise ``(False, 0.0)``
    """
    outcome = parse_double_outcome(text)
    if not outcome.ok:
        _log_failure("try_parse_double", outcome)
    return outcome.ok, outcome.value_or(0.0)


def parse_double(text: Optional[str]) -> float:
    """
    Convert text to its double-precision floating point equivalent.

    Args:
        text: Text containing a number

    Returns:
        The parsed value, or DOUBLE_EPSILON if the text is malformed or out of range

    Raises:
        InvalidArgumentError: If text is None
    """
    outcome = parse_double_outcome(text)
    _require_text("parse_double", outcome)
    if not outcome.ok:
        _log_failure("parse_double", outcome)
    return outcome.value_or(DOUBLE_EPSILON)


def try_parse_decimal(text: Optional[str], *, limits: DecimalLimits = DEFAULT_DECIMAL_LIMITS) -> Tuple[bool, Decimal]:
    """
    Convert text to its Decimal equivalent.

    None is reported as a failed conversion rather than an error.

    Returns:
        ``(True, value)`` when the conversion succeeded, otherwise ``(False, Decimal(0))``
    """
    outcome = parse_decimal_outcome(text, limits=limits)
    if not outcome.ok:
        _log_failure("try_parse_decimal", outcome)
    return outcome.ok, outcome.value_or(Decimal(0))


def parse_decimal(text: Optional[str], *, limits: DecimalLimits = DEFAULT_DECIMAL_LIMITS) -> Decimal:
    """
    Convert text to its Decimal equivalent.

    Args:
        text: Text containing a number
        limits: Range and precision bounds (System.Decimal bounds by default)

    Returns:
        The parsed value, DECIMAL_OVERFLOW_SENTINEL (-2.2) when the value is out
        of range, or DECIMAL_MALFORMED_SENTINEL (-1.1) for any other failure

    Raises:
        InvalidArgumentError: If text is None
    """
    outcome = parse_decimal_outcome(text, limits=limits)
    _require_text("parse_decimal", outcome)
    if outcome.ok:
        return outcome.value  # type: ignore[return-value]

    _log_failure("parse_decimal", outcome)
    if outcome.status is ParseStatus.OVERFLOW:
        return DECIMAL_OVERFLOW_SENTINEL
    return DECIMAL_MALFORMED_SENTINEL


__all__ = [
    "DECIMAL_MALFORMED_SENTINEL",
    "DECIMAL_OVERFLOW_SENTINEL",
    "DOUBLE_EPSILON",
    "FLOAT_SENTINEL",
    "parse_decimal",
    "parse_decimal_outcome",
    "parse_double",
    "parse_double_outcome",
    "parse_float",
    "parse_float_outcome",
    "try_parse_decimal",
    "try_parse_double",
    "try_parse_float",
]
