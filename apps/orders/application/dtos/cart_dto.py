"""
Cart DTOs.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from shared.domain import quantize
from ...domain.entities.cart import Cart
from ...domain.entities.cart_line import CartLine


@dataclass
class AddToCartDTO:
    """DTO for adding a line to the cart."""
    item_id: str
    quantity: int


@dataclass
class CartLineDTO:
    """DTO for cart line output."""
    item_id: str
    item_name: str
    unit_price: Decimal
    quantity: int
    subtotal: Decimal

    @classmethod
    def from_entity(cls, line: CartLine) -> 'CartLineDTO':
        return cls(
            item_id=line.item.id,
            item_name=line.item.name,
            unit_price=line.item.unit_price,
            quantity=line.quantity,
            subtotal=quantize(line.subtotal),
        )


@dataclass
class CartDTO:
    """DTO for cart output."""
    lines: List[CartLineDTO] = field(default_factory=list)
    subtotal: Decimal = Decimal('0.00')
    tax_total: Decimal = Decimal('0.00')
    item_count: int = 0

    @classmethod
    def from_entity(cls, cart: Cart) -> 'CartDTO':
        """Create DTO from entity."""
        return cls(
            lines=[CartLineDTO.from_entity(line) for line in cart.lines],
            subtotal=quantize(cart.subtotal),
            tax_total=quantize(cart.tax_total),
            item_count=cart.item_count,
        )

    @property
    def is_empty(self) -> bool:
        return not self.lines
