"""
Pytest configuration and fixtures.
"""
from decimal import Decimal
from typing import List, Optional, Tuple

import pytest

from apps.catalog.domain.value_objects.item import Item
from apps.catalog.infrastructure.repositories import InMemoryCatalogRepository
from apps.orders.application.session import ShopSession
from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.entities.invoice import Invoice
from apps.orders.domain.exceptions import InvoicePersistenceError
from apps.orders.domain.repositories.invoice_repository import InvoiceRepository
from apps.payments.domain import PaymentProcessor, resolve_processor


class InMemoryInvoiceRepository(InvoiceRepository):
    """Keeps saved invoices in a list."""

    def __init__(self):
        self.invoices: List[Invoice] = []

    def save(self, invoice: Invoice) -> Invoice:
        self.invoices.append(invoice)
        return invoice


class FailingInvoiceRepository(InvoiceRepository):
    """Fails every write, like a full disk."""

    def __init__(self):
        self.attempts = 0

    def save(self, invoice: Invoice) -> Invoice:
        self.attempts += 1
        raise InvoicePersistenceError(invoice.order_number.value, "No space left on device")


class RecordingPayments:
    """Payment resolver that records charges instead of logging them."""

    def __init__(self):
        self.charges: List[Tuple[str, Decimal]] = []

    def resolve(self, method: Optional[str]) -> PaymentProcessor:
        real = resolve_processor(method)
        return PaymentProcessor(
            real.method,
            lambda amount: self.charges.append((real.method, amount)),
        )


@pytest.fixture(autouse=True)
def invoice_dir(settings, tmp_path):
    """Send invoice files to a per-test directory."""
    directory = tmp_path / 'invoices'
    settings.CHECKOUT = {**settings.CHECKOUT, 'INVOICE_DIR': str(directory)}
    return directory


@pytest.fixture
def catalog():
    return InMemoryCatalogRepository.with_defaults()


@pytest.fixture
def laptop(catalog):
    return catalog.get('P101')


@pytest.fixture
def book(catalog):
    return catalog.get('P102')


@pytest.fixture
def headphones(catalog):
    return catalog.get('P103')


@pytest.fixture
def lamp(catalog):
    return catalog.get('P104')


@pytest.fixture
def cart():
    return Cart()


@pytest.fixture
def payments():
    return RecordingPayments()


@pytest.fixture
def invoices():
    return InMemoryInvoiceRepository()


@pytest.fixture
def failing_invoices():
    return FailingInvoiceRepository()


@pytest.fixture
def shop(catalog, cart, invoices, payments):
    return ShopSession(
        catalog=catalog,
        invoice_repository=invoices,
        cart=cart,
        resolve_payment=payments.resolve,
    )


@pytest.fixture
def make_item():
    def _make(item_id='X1', name='Thing', price='10.00', category='Home'):
        return Item(id=item_id, name=name, unit_price=Decimal(price), category=category)
    return _make


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()
