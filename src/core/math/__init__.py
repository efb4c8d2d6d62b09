"""
Core math modules

Exact decimal primitives for registry amounts: inverse-synth freeze
thresholds and markdown number formatting.
"""

# Freeze thresholds
from src.core.math.thresholds import (
    Number,
    fractional_digits,
    freeze_threshold,
    to_decimal,
)

# Number formatting
from src.core.math.number_format import (
    AMOUNT_MANTISSA,
    format_amount,
    plain_number,
)

__all__ = [
    # Freeze thresholds
    "Number",
    "fractional_digits",
    "freeze_threshold",
    "to_decimal",
    # Number formatting
    "AMOUNT_MANTISSA",
    "format_amount",
    "plain_number",
]
