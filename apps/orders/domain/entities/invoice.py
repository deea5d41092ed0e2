"""
Invoice entity.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Tuple

from shared.domain import ValueObject, utc_now
from ..value_objects.order_number import OrderNumber
from .cart_line import CartLine


@dataclass(frozen=True)
class InvoiceLine(ValueObject):
    """One row of the invoice table."""
    item_name: str
    quantity: int
    line_total: Decimal


@dataclass(frozen=True)
class Invoice:
    """Write-once record of a completed checkout."""
    order_number: OrderNumber
    lines: Tuple[InvoiceLine, ...]
    total_tax: Decimal
    grand_total: Decimal
    issued_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        lines: Iterable[CartLine],
        total_tax: Decimal,
        grand_total: Decimal,
        order_number: OrderNumber = None,
    ) -> 'Invoice':
        """Snapshot the given cart lines into a new invoice."""
        return cls(
            order_number=order_number or OrderNumber.generate(),
            lines=tuple(
                InvoiceLine(
                    item_name=line.item.name,
                    quantity=line.quantity,
                    line_total=line.subtotal,
                )
                for line in lines
            ),
            total_tax=total_tax,
            grand_total=grand_total,
        )

    @property
    def timestamp(self) -> str:
        """ISO-8601 issue time."""
        return self.issued_at.isoformat()
