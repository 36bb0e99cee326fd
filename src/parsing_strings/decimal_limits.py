"""Range and precision bounds applied to decimal parsing."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

# 2**96 - 1: the largest 96-bit coefficient at scale zero
SYSTEM_DECIMAL_MAX = Decimal("79228162514264337593543950335")
SYSTEM_DECIMAL_MAX_SCALE = 28
SYSTEM_DECIMAL_PRECISION = 29


@dataclass(frozen=True)
class DecimalLimits:
    """Bounds for a fixed-point decimal value.

    Attributes:
        max_magnitude: Largest absolute value accepted before reporting overflow
        max_scale: Maximum number of fractional digits kept after rounding
        precision: Significant digits kept after rounding
    """

    max_magnitude: Decimal = SYSTEM_DECIMAL_MAX
    max_scale: int = SYSTEM_DECIMAL_MAX_SCALE
    precision: int = SYSTEM_DECIMAL_PRECISION

    def __post_init__(self) -> None:
        if self.max_magnitude <= 0:
            raise ValueError(f"max_magnitude must be positive (got {self.max_magnitude})")
        if self.max_scale < 0:
            raise ValueError(f"max_scale must be non-negative (got {self.max_scale})")
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1 (got {self.precision})")


DEFAULT_DECIMAL_LIMITS = DecimalLimits()

__all__ = [
    "DEFAULT_DECIMAL_LIMITS",
    "DecimalLimits",
    "SYSTEM_DECIMAL_MAX",
    "SYSTEM_DECIMAL_MAX_SCALE",
    "SYSTEM_DECIMAL_PRECISION",
]
