"""
Cart line value.
"""
from dataclasses import dataclass
from decimal import Decimal

from apps.catalog.domain.value_objects.item import Item
from shared.domain import ValueObject
from ..exceptions import InvalidQuantityError


def validate_quantity(quantity: int) -> None:
    """Raise ``InvalidQuantityError`` unless ``quantity`` is a positive int."""
    # bool is an int subclass
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantityError(quantity)


@dataclass(frozen=True)
class CartLine(ValueObject):
    """One selected item and its quantity. Owned by a Cart."""
    item: Item
    quantity: int

    def __post_init__(self):
        validate_quantity(self.quantity)

    @property
    def subtotal(self) -> Decimal:
        """Calculate the line subtotal."""
        return self.item.unit_price * self.quantity

    @property
    def tax_amount(self) -> Decimal:
        """Calculate the GST due on this line."""
        return self.subtotal * self.item.tax_rate / 100
