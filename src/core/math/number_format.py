"""
Number Format — Rendering of registry amounts in markdown tables

Amounts are printed with thousands separators and a fixed 5-digit mantissa;
an all-zero mantissa is dropped entirely:

    9000        -> '9,000'
    1.5         -> '1.50000'
    12345.678   -> '12,345.67800'
    0.123456789 -> '0.12346'
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from src.core.math.thresholds import Number, to_decimal

# Mantissa length of table amounts
AMOUNT_MANTISSA: Final[int] = 5


def format_amount(value: Number, mantissa: int = AMOUNT_MANTISSA) -> str:
    """
    Format an amount for a markdown table.

    Args:
        value: Amount to format
        mantissa: Number of fractional digits kept (rounded half-up)

    Returns:
        Thousands-separated string; the fractional part is omitted when it
        rounds to zero
    """
    if mantissa < 0:
        raise ValueError(f"mantissa must be non-negative, got {mantissa}")

    amount = to_decimal(value).quantize(Decimal(1).scaleb(-mantissa), rounding=ROUND_HALF_UP)
    text = format(amount, f",.{mantissa}f")

    whole, _, fraction = text.partition(".")
    if not fraction or set(fraction) == {"0"}:
        return whole
    return text


def plain_number(value: Number) -> str:
    """
    Shortest fixed-point rendering of a number, without exponent or trailing zeros.

    Examples:
        >>> plain_number(Decimal("150.0"))
        '150'
        >>> plain_number(Decimal("0.2500"))
        '0.25'
    """
    amount = to_decimal(value)
    if amount == 0:
        return "0"
    return format(amount.normalize(), "f")
