"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Tuple

from apps.catalog.domain.value_objects.item import Item
from shared.domain import BaseEntity
from ..exceptions import OutOfStockError
from .cart_line import CartLine, validate_quantity

DEFAULT_MAX_QUANTITY_PER_REQUEST = 10


@dataclass(eq=False)
class Cart(BaseEntity):
    """Shopping cart that keeps lines in insertion order.

    Not safe for concurrent mutation; use one cart per checkout session.
    """
    max_quantity_per_request: int = DEFAULT_MAX_QUANTITY_PER_REQUEST
    _lines: List[CartLine] = field(default_factory=list, repr=False)

    def add_line(self, item: Item, quantity: int) -> CartLine:
        """Append a new line for ``item``.

        Adding an item that is already in the cart creates a second line;
        quantities are not merged.
        """
        validate_quantity(quantity)
        if quantity > self.max_quantity_per_request:
            raise OutOfStockError(
                item_id=item.id,
                requested=quantity,
                available=self.max_quantity_per_request,
            )
        line = CartLine(item=item, quantity=quantity)
        self._lines.append(line)
        self.touch()
        return line

    def clear(self) -> None:
        """Clear all lines from the cart."""
        self._lines.clear()
        self.touch()

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        """Read-only view of the lines, in insertion order."""
        return tuple(self._lines)

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def subtotal(self) -> Decimal:
        """Sum of ``quantity x unit price`` over all lines."""
        return sum((line.subtotal for line in self._lines), Decimal('0'))

    @property
    def tax_total(self) -> Decimal:
        """Sum of line tax amounts."""
        return sum((line.tax_amount for line in self._lines), Decimal('0'))

    @property
    def item_count(self) -> int:
        """Get the total number of units."""
        return sum(line.quantity for line in self._lines)

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return len(self._lines) == 0
