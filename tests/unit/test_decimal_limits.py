"""Tests for DecimalLimits."""

from __future__ import annotations

from decimal import Decimal

import pytest

from parsing_strings.decimal_limits import DEFAULT_DECIMAL_LIMITS, DecimalLimits


class TestDecimalLimits:
    """Tests for DecimalLimits validation."""

    def test_defaults_match_system_decimal(self) -> None:
        """Defaults mirror the 96-bit System.Decimal bounds."""
        assert DEFAULT_DECIMAL_LIMITS.max_magnitude == Decimal(2**96 - 1)
        assert DEFAULT_DECIMAL_LIMITS.max_scale == 28
        assert DEFAULT_DECIMAL_LIMITS.precision == 29

    def test_non_positive_magnitude_rejected(self) -> None:
        """max_magnitude must be positive."""
        with pytest.raises(ValueError, match="max_magnitude"):
            DecimalLimits(max_magnitude=Decimal(0))

    def test_negative_scale_rejected(self) -> None:
        """max_scale must be non-negative."""
        with pytest.raises(ValueError, match="max_scale"):
            DecimalLimits(max_scale=-1)

    def test_zero_precision_rejected(self) -> None:
        """precision must be at least one digit."""
        with pytest.raises(ValueError, match="precision"):
            DecimalLimits(precision=0)
