"""
Money helpers.

Amounts are plain ``Decimal`` values in a single currency. Arithmetic stays
exact; rounding to cents happens only when an amount is shown or stored.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENT = Decimal('0.01')
ZERO = Decimal('0')

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to ``Decimal`` without binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize(amount: Number) -> Decimal:
    """Round an amount to cents."""
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def formatted(amount: Number) -> str:
    """Get formatted money string."""
    return f"${quantize(amount):,.2f}"
