"""
Order wiring from Django settings.
"""
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.catalog.domain.repositories.catalog_repository import CatalogRepository
from apps.catalog.infrastructure.providers import get_catalog_repository
from ..application.session import ShopSession
from ..domain.entities.cart import Cart
from ..domain.repositories.invoice_repository import InvoiceRepository
from .repositories import DjangoInvoiceRepository, FileInvoiceRepository

INVOICE_BACKENDS = ('file', 'database')


def get_invoice_repository() -> InvoiceRepository:
    """Build the invoice sink selected by ``CHECKOUT['INVOICE_BACKEND']``."""
    backend = settings.CHECKOUT.get('INVOICE_BACKEND', 'file')
    if backend == 'file':
        return FileInvoiceRepository(settings.CHECKOUT['INVOICE_DIR'])
    if backend == 'database':
        return DjangoInvoiceRepository()
    raise ImproperlyConfigured(
        f"CHECKOUT['INVOICE_BACKEND'] must be one of {INVOICE_BACKENDS}, got {backend!r}"
    )


def new_cart() -> Cart:
    """Empty cart using the configured per-request quantity ceiling."""
    return Cart(max_quantity_per_request=settings.CHECKOUT['MAX_QUANTITY_PER_REQUEST'])


def build_shop_session(
    cart: Optional[Cart] = None,
    catalog: Optional[CatalogRepository] = None,
) -> ShopSession:
    """Assemble a session from settings."""
    return ShopSession(
        catalog=catalog if catalog is not None else get_catalog_repository(),
        invoice_repository=get_invoice_repository(),
        cart=cart if cart is not None else new_cart(),
    )
