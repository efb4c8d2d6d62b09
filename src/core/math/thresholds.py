"""
Freeze Thresholds — Underlying prices at which an inverted synth freezes

An inverted synth quotes the mirror image of its underlying about the entry
point: synth = 2 * entry - underlying. Its upper/lower limits are synth-side
prices, so the underlying price at which a limit is reached is the mirror of
that limit:

    underlying_at_limit = entry_point * 2 - limit

CRITICAL INVARIANTS:
1. Output precision equals the number of fractional digits of `limit`
   (0 for integers), padding zeros or rounding half-up as required
2. No validation of ordering or sign: contradictory limits still produce a
   numeric result
3. Exact decimal arithmetic, deterministic output
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Decimal view of a numeric value that keeps its written precision.

    Floats go through str() so that 150.0 stays Decimal('150.0').

    Examples:
        >>> to_decimal(2.25)
        Decimal('2.25')
        >>> to_decimal(150)
        Decimal('150')
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got bool: {value!r}")
    return Decimal(str(value))


def fractional_digits(value: Number) -> int:
    """
    Number of fractional digits in the decimal representation of `value`.

    Examples:
        >>> fractional_digits(Decimal("2.25"))
        2
        >>> fractional_digits(150)
        0
        >>> fractional_digits(150.0)
        1
    """
    exponent = to_decimal(value).as_tuple().exponent
    if not isinstance(exponent, int):
        raise ValueError(f"Not a finite number: {value!r}")
    return max(0, -exponent)


def freeze_threshold(entry_point: Number, limit: Number) -> str:
    """
    Underlying price at which an inverted synth reaches `limit`.

    Args:
        entry_point: Underlying price at synth creation
        limit: Upper or lower synth-side freeze price

    Returns:
        `entry_point * 2 - limit` as a fixed-point string with as many
        fractional digits as `limit`

    Examples:
        >>> freeze_threshold(100, 150)
        '50'
        >>> freeze_threshold(Decimal("4.5"), Decimal("2.25"))
        '6.75'
        >>> freeze_threshold(100, Decimal("150.0"))
        '50.0'
    """
    entry = to_decimal(entry_point)
    lim = to_decimal(limit)

    digits = fractional_digits(lim)
    result = (entry * 2 - lim).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)

    return format(result, "f")
