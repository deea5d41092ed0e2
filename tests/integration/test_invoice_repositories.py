"""
Tests for the file and database invoice sinks.
"""
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from apps.orders.domain.entities.invoice import Invoice, InvoiceLine
from apps.orders.domain.exceptions import InvoicePersistenceError
from apps.orders.domain.value_objects import OrderNumber
from apps.orders.infrastructure.models import InvoiceModel
from apps.orders.infrastructure.repositories import (
    DjangoInvoiceRepository,
    FileInvoiceRepository,
    render_invoice,
)


@pytest.fixture
def invoice():
    return Invoice(
        order_number=OrderNumber('ORD-1700000000000-AB12'),
        lines=(
            InvoiceLine('Laptop', 1, Decimal('1200.00')),
            InvoiceLine('Java Book', 2, Decimal('90.00')),
        ),
        total_tax=Decimal('220.5'),
        grand_total=Decimal('1520.55'),
        issued_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )


class TestRenderInvoice:
    def test_layout(self, invoice):
        assert render_invoice(invoice).splitlines() == [
            'E-COMMERCE INVOICE',
            'Order ID: ORD-1700000000000-AB12',
            'Date: 2024-01-02T03:04:05+00:00',
            '-' * 48,
            'Item                 Qty        Total     ',
            'Laptop               1          $1200.00   ',
            'Java Book            2          $90.00     ',
            '-' * 48,
            'Total Tax: $220.50',
            'Grand Total: $1520.55',
        ]


class TestFileInvoiceRepository:
    def test_writes_one_file_per_order(self, invoice, tmp_path):
        repository = FileInvoiceRepository(tmp_path / 'out')

        assert repository.save(invoice) is invoice

        path = tmp_path / 'out' / 'invoice_ORD-1700000000000-AB12.txt'
        assert path.read_text(encoding='utf-8') == render_invoice(invoice)

    def test_never_overwrites(self, invoice, tmp_path):
        repository = FileInvoiceRepository(tmp_path)
        repository.save(invoice)

        with pytest.raises(InvoicePersistenceError) as exc_info:
            repository.save(invoice)
        assert exc_info.value.order_number == 'ORD-1700000000000-AB12'
        assert exc_info.value.code == 'INVOICE_PERSISTENCE_FAILED'

    def test_unwritable_directory(self, invoice, tmp_path):
        blocker = tmp_path / 'taken'
        blocker.write_text('not a directory')

        with pytest.raises(InvoicePersistenceError) as exc_info:
            FileInvoiceRepository(blocker).save(invoice)
        assert exc_info.value.message.startswith('Error generating invoice ORD-1700000000000-AB12')


@pytest.mark.django_db
class TestDjangoInvoiceRepository:
    def test_save_and_find(self, invoice):
        repository = DjangoInvoiceRepository()

        repository.save(invoice)
        found = repository.find_by_order_number('ORD-1700000000000-AB12')

        assert found.order_number == invoice.order_number
        assert found.total_tax == Decimal('220.50')
        assert found.grand_total == Decimal('1520.55')
        assert found.issued_at == invoice.issued_at
        assert [(l.item_name, l.quantity, l.line_total) for l in found.lines] == [
            ('Laptop', 1, Decimal('1200.00')),
            ('Java Book', 2, Decimal('90.00')),
        ]

    def test_find_missing(self):
        assert DjangoInvoiceRepository().find_by_order_number('ORD-0-XXXX') is None

    def test_duplicate_order_number(self, invoice):
        repository = DjangoInvoiceRepository()
        repository.save(invoice)

        with pytest.raises(InvoicePersistenceError):
            repository.save(invoice)
        assert InvoiceModel.objects.count() == 1
