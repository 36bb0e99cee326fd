"""Bounded fixed-point conversion on top of ``decimal.Decimal``."""

from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_EVEN, Context, Decimal, InvalidOperation

from ..decimal_limits import DecimalLimits
from ..outcome import ParseOutcome, ParseStatus


def _rounding_context(limits: DecimalLimits) -> Context:
    return Context(prec=limits.precision, rounding=ROUND_HALF_EVEN, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _has_exponent(text: str) -> bool:
    return "e" in text or "E" in text


def convert_decimal(text: str, limits: DecimalLimits) -> ParseOutcome[Decimal]:
    """
    Parse *text* as a decimal bounded by *limits*.

    Only fixed-point notation is accepted: exponents, NaN and infinity are
    malformed. The value is rounded half-even to ``limits.precision``
    significant digits and then to ``limits.max_scale`` fractional digits;
    a rounded magnitude above ``limits.max_magnitude`` overflows.
    """
    if _has_exponent(text):
        return ParseOutcome.failure(ParseStatus.MALFORMED, text)
    try:
        raw = Decimal(text)
    except InvalidOperation:
        return ParseOutcome.failure(ParseStatus.MALFORMED, text)

    if not raw.is_finite():
        return ParseOutcome.failure(ParseStatus.MALFORMED, text)

    context = _rounding_context(limits)
    value = context.plus(raw)
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -limits.max_scale:
        value = value.quantize(Decimal(1).scaleb(-limits.max_scale), context=context)
    # copy_abs is exact; abs() would round under the ambient context
    if value.copy_abs() > limits.max_magnitude:
        return ParseOutcome.failure(ParseStatus.OVERFLOW, text)
    return ParseOutcome.success(value, text)
