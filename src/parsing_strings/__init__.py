"""Helpers that convert text into float32, float64 and bounded Decimal values."""

from .decimal_limits import DEFAULT_DECIMAL_LIMITS, DecimalLimits
from .errors import ApplicationError, InvalidArgumentError
from .floating_point_parser import (
    DECIMAL_MALFORMED_SENTINEL,
    DECIMAL_OVERFLOW_SENTINEL,
    DOUBLE_EPSILON,
    FLOAT_SENTINEL,
    parse_decimal,
    parse_decimal_outcome,
    parse_double,
    parse_double_outcome,
    parse_float,
    parse_float_outcome,
    try_parse_decimal,
    try_parse_double,
    try_parse_float,
)
from .outcome import ParseOutcome, ParseStatus

__all__ = [
    "ApplicationError",
    "DECIMAL_MALFORMED_SENTINEL",
    "DECIMAL_OVERFLOW_SENTINEL",
    "DEFAULT_DECIMAL_LIMITS",
    "DOUBLE_EPSILON",
    "DecimalLimits",
    "FLOAT_SENTINEL",
    "InvalidArgumentError",
    "ParseOutcome",
    "ParseStatus",
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
