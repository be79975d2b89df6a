"""French display formatting for scenario fields.

All formatters are total: missing or invalid input (None, NaN, infinities,
booleans, unparseable strings) returns the MISSING sentinel instead of
raising. Rounding is always ROUND_HALF_UP, applied to the decimal string of
the value so that binary float artefacts never leak into the display.

Examples::

    >>> format_money(1234567)
    '1 234 567 €'
    >>> format_percent_from_fraction(0.1234, 2)
    '12,34 %'
    >>> format_percent_raw(12.34, 2)
    '12,34 %'
    >>> format_ratio(None)
    '–'
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

MISSING = "–"
GROUP_SEPARATOR = " "
DECIMAL_SEPARATOR = ","
CURRENCY_SUFFIX = " €"
PERCENT_SUFFIX = " %"


def to_decimal(value: Any) -> Decimal | None:
    """Convert a raw field value to a finite Decimal, or None if unusable."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        number = value
    else:
        try:
            # str() keeps the shortest repr, so 0.1234 stays 0.1234
            number = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return None

    if not number.is_finite():
        return None
    return number


def _group_thousands(digits: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return GROUP_SEPARATOR.join(groups)


def format_decimal(number: Decimal, digits: int) -> str:
    """Round half-up to ``digits`` places and render with French separators.

    The rounding runs with enough precision for the integer part, so very
    large values (a ratio over a near-zero drawdown) never overflow the
    default 28-digit context.

    Raises:
        ValueError: If ``digits`` is negative.
    """
    if digits < 0:
        raise ValueError(f"digits must be >= 0, got {digits}")

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + digits + 2)
        quantum = Decimal(1).scaleb(-digits)
        rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)

    sign = "-" if rounded < 0 else ""
    integer_part, _, fraction_part = f"{abs(rounded):f}".partition(".")

    text = sign + _group_thousands(integer_part)
    if digits:
        text += DECIMAL_SEPARATOR + fraction_part.ljust(digits, "0")
    return text


def _valid_digits(digits: Any) -> bool:
    return isinstance(digits, int) and not isinstance(digits, bool) and digits >= 0


def format_money(value: Any) -> str:
    """Whole-euro amount with grouped thousands, e.g. ``'1 234 567 €'``."""
    number = to_decimal(value)
    if number is None:
        return MISSING
    return format_decimal(number, 0) + CURRENCY_SUFFIX


def format_percent_from_fraction(value: Any, digits: int = 2) -> str:
    """Fraction rendered as a percentage: 0.1234 -> ``'12,34 %'``.

    A negative ``digits`` yields the sentinel, like any invalid input.
    """
    number = to_decimal(value)
    if number is None or not _valid_digits(digits):
        return MISSING
    # scaleb shifts the exponent, exact for any finite Decimal
    return format_decimal(number.scaleb(2), digits) + PERCENT_SUFFIX


def format_percent_raw(value: Any, digits: int = 2) -> str:
    """Value already in percent units: 12.34 -> ``'12,34 %'`` (no scaling)."""
    number = to_decimal(value)
    if number is None or not _valid_digits(digits):
        return MISSING
    return format_decimal(number, digits) + PERCENT_SUFFIX


def format_ratio(value: Any, digits: int = 2) -> str:
    """Plain ratio without unit: 1.256 -> ``'1,26'``."""
    number = to_decimal(value)
    if number is None or not _valid_digits(digits):
        return MISSING
    return format_decimal(number, digits)


def format_count(value: Any) -> str:
    """Integer count (trade count) without grouping, or the sentinel."""
    number = to_decimal(value)
    if number is None:
        return MISSING
    return str(int(number.to_integral_value(rounding=ROUND_HALF_UP)))
