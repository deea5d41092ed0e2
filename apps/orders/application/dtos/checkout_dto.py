"""
Checkout DTOs.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from .cart_dto import CartLineDTO


@dataclass
class CheckoutDTO:
    """DTO for a checkout request."""
    coupon_code: Optional[str] = None
    payment_method: Optional[str] = None


@dataclass
class CheckoutResultDTO:
    """DTO for checkout output.

    ``completed`` is False only when the cart was empty and nothing happened.
    """
    completed: bool
    states: List[str] = field(default_factory=list)
    order_number: Optional[str] = None
    lines: List[CartLineDTO] = field(default_factory=list)
    gross_subtotal: Decimal = Decimal('0.00')
    total_tax: Decimal = Decimal('0.00')
    subtotal_with_tax: Decimal = Decimal('0.00')
    final_amount: Decimal = Decimal('0.00')
    promotion: str = ""
    payment_method: Optional[str] = None
    invoice_saved: bool = False

    @classmethod
    def empty(cls, states: List[str]) -> 'CheckoutResultDTO':
        return cls(completed=False, states=states)
