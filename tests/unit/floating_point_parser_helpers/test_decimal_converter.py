"""Tests for convert_decimal."""

from __future__ import annotations

from decimal import Decimal

from parsing_strings.decimal_limits import DEFAULT_DECIMAL_LIMITS, DecimalLimits
from parsing_strings.floating_point_parser_helpers import convert_decimal
from parsing_strings.outcome import ParseStatus


def test_preserves_trailing_zeros():
    outcome = convert_decimal("12.500", DEFAULT_DECIMAL_LIMITS)
    assert outcome.ok
    assert str(outcome.value) == "12.500"


def test_rejects_special_values():
    assert convert_decimal("NaN", DEFAULT_DECIMAL_LIMITS).status is ParseStatus.MALFORMED
    assert convert_decimal("-Infinity", DEFAULT_DECIMAL_LIMITS).status is ParseStatus.MALFORMED


def test_overflow_beyond_magnitude():
    assert convert_decimal("1" + "0" * 29, DEFAULT_DECIMAL_LIMITS).status is ParseStatus.OVERFLOW


def test_precision_rounds_half_even():
    limits = DecimalLimits(precision=3, max_scale=10)
    assert convert_decimal("1.235", limits).value == Decimal("1.24")
    assert convert_decimal("1.225", limits).value == Decimal("1.22")


def test_magnitude_checked_after_rounding():
    limits = DecimalLimits(max_magnitude=Decimal("9.5"), max_scale=0)
    assert convert_decimal("9.4", limits).value == Decimal(9)
    assert convert_decimal("9.5", limits).status is ParseStatus.OVERFLOW
    assert convert_decimal("9.6", limits).status is ParseStatus.OVERFLOW


def test_maximum_is_not_rounded_by_range_check():
    outcome = convert_decimal("-79228162514264337593543950335", DEFAULT_DECIMAL_LIMITS)
    assert outcome.ok
    assert outcome.value == Decimal("-79228162514264337593543950335")


def test_exponents_are_malformed():
    assert convert_decimal("1e5", DEFAULT_DECIMAL_LIMITS).status is ParseStatus.MALFORMED
    assert convert_decimal("1E1000000", DEFAULT_DECIMAL_LIMITS).status is ParseStatus.MALFORMED
