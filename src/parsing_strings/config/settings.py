"""
PARSING_STRINGS_* environment settings.

Parse functions never consult these; callers load them once and pass the
result explicitly (``parse_decimal(text, limits=load_decimal_limits())``).
"""

from __future__ import annotations

import os
from decimal import Decimal
from typing import Optional

from ..decimal_limits import (
    SYSTEM_DECIMAL_MAX,
    SYSTEM_DECIMAL_MAX_SCALE,
    SYSTEM_DECIMAL_PRECISION,
    DecimalLimits,
)
from .errors import ConfigurationError

ENV_PREFIX = "PARSING_STRINGS_"
DECIMAL_PRECISION = "DECIMAL_PRECISION"
DECIMAL_MAX_SCALE = "DECIMAL_MAX_SCALE"
DECIMAL_MAX_MAGNITUDE = "DECIMAL_MAX_MAGNITUDE"
LOG_LEVEL = "LOG_LEVEL"


def setting_name(key: str) -> str:
    return f"{ENV_PREFIX}{key}"


def read_setting(key: str) -> Optional[str]:
    """Return the stripped value of PARSING_STRINGS_<key>, or None when unset or blank."""
    raw = os.environ.get(setting_name(key))
    if raw is None:
        return None
    return raw.strip() or None


def _digit_setting(key: str, default: int, *, minimum: int) -> int:
    raw = read_setting(key)
    if raw is None:
        return default
    if not raw.isdigit() or int(raw) < minimum:
        raise ConfigurationError.invalid_setting(setting_name(key), raw, f"an integer >= {minimum}")
    return int(raw)


def load_decimal_limits() -> DecimalLimits:
    """
    Build DecimalLimits from the environment.

    Unset settings fall back to the System.Decimal bounds.

    Raises:
        ConfigurationError: If a setting is not a plain integer in range
    """
    precision = _digit_setting(DECIMAL_PRECISION, SYSTEM_DECIMAL_PRECISION, minimum=1)
    max_scale = _digit_setting(DECIMAL_MAX_SCALE, SYSTEM_DECIMAL_MAX_SCALE, minimum=0)

    max_magnitude = Decimal(_digit_setting(DECIMAL_MAX_MAGNITUDE, int(SYSTEM_DECIMAL_MAX), minimum=1))

    return DecimalLimits(max_magnitude=max_magnitude, max_scale=max_scale, precision=precision)


__all__ = [
    "DECIMAL_MAX_MAGNITUDE",
    "DECIMAL_MAX_SCALE",
    "DECIMAL_PRECISION",
    "ENV_PREFIX",
    "LOG_LEVEL",
    "load_decimal_limits",
    "read_setting",
    "setting_name",
]
