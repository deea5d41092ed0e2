"""
Django ORM implementation of InvoiceRepository.
"""
from typing import Optional

from django.db import DatabaseError, transaction

from shared.domain import quantize

from ...domain.entities.invoice import Invoice, InvoiceLine
from ...domain.exceptions import InvoicePersistenceError
from ...domain.repositories.invoice_repository import InvoiceRepository
from ...domain.value_objects.order_number import OrderNumber
from ..models.invoice_model import InvoiceModel, InvoiceLineModel


class DjangoInvoiceRepository(InvoiceRepository):
    """Django ORM based invoice repository implementation."""

    def save(self, invoice: Invoice) -> Invoice:
        """Insert the invoice and its lines in one transaction."""
        try:
            with transaction.atomic():
                model = InvoiceModel.objects.create(
                    order_number=invoice.order_number.value,
                    issued_at=invoice.issued_at,
                    total_tax=quantize(invoice.total_tax),
                    grand_total=quantize(invoice.grand_total),
                )
                InvoiceLineModel.objects.bulk_create([
                    InvoiceLineModel(
                        invoice=model,
                        position=position,
                        item_name=line.item_name,
                        quantity=line.quantity,
                        line_total=quantize(line.line_total),
                    )
                    for position, line in enumerate(invoice.lines)
                ])
        except DatabaseError as e:
            raise InvoicePersistenceError(invoice.order_number.value, str(e)) from e
        return invoice

    def find_by_order_number(self, order_number: str) -> Optional[Invoice]:
        """Find an invoice by order number."""
        try:
            model = InvoiceModel.objects.prefetch_related('lines').get(order_number=order_number)
        except InvoiceModel.DoesNotExist:
            return None
        return self._to_entity(model)

    def _to_entity(self, model: InvoiceModel) -> Invoice:
        """Convert Django model to domain entity."""
        return Invoice(
            order_number=OrderNumber(value=model.order_number),
            lines=tuple(
                InvoiceLine(
                    item_name=line.item_name,
                    quantity=line.quantity,
                    line_total=line.line_total,
                )
                for line in model.lines.all()
            ),
            total_tax=model.total_tax,
            grand_total=model.grand_total,
            issued_at=model.issued_at,
        )
