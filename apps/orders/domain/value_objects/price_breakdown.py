"""
Price breakdown value object.
"""
from dataclasses import dataclass
from decimal import Decimal

from shared.domain import ValueObject


@dataclass(frozen=True)
class PriceBreakdown(ValueObject):
    """Gross subtotal and tax of a cart, recomputed on every checkout."""
    gross_subtotal: Decimal
    total_tax: Decimal

    @property
    def subtotal_with_tax(self) -> Decimal:
        return self.gross_subtotal + self.total_tax
