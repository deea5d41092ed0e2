"""
Item value object.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shared.domain import ValueObject, to_decimal, formatted
from ..exceptions import InvalidItemError
from .tax_rate import tax_rate_for


@dataclass(frozen=True)
class Item(ValueObject):
    """A purchasable catalog item. Created once at catalog load, never mutated."""
    id: str
    name: str
    unit_price: Decimal
    category: str

    def __post_init__(self):
        if not self.id or not self.id.strip():
            raise InvalidItemError("Item id is required", field="id")
        if not self.name or not self.name.strip():
            raise InvalidItemError("Item name is required", field="name")
        try:
            price = to_decimal(self.unit_price)
        except (InvalidOperation, ValueError):
            raise InvalidItemError(f"Invalid price: {self.unit_price!r}", field="unit_price")
        if not price.is_finite() or price < 0:
            raise InvalidItemError("Price must be non-negative", field="unit_price")
        object.__setattr__(self, 'id', self.id.strip())
        object.__setattr__(self, 'unit_price', price)

    @property
    def tax_rate(self) -> Decimal:
        """Tax rate in percent, derived from the category."""
        return tax_rate_for(self.category)

    def __str__(self) -> str:
        return f"{self.id:<5} | {self.name:<20} | {formatted(self.unit_price):<9} | {self.category}"
