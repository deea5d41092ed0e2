"""
Tests for wiring the order components from settings.
"""
import pytest
from django.core.exceptions import ImproperlyConfigured

from apps.catalog.infrastructure.repositories import InMemoryCatalogRepository
from apps.orders.domain.entities.cart import Cart
from apps.orders.infrastructure.providers import (
    build_shop_session,
    get_invoice_repository,
    new_cart,
)
from apps.orders.infrastructure.repositories import DjangoInvoiceRepository, FileInvoiceRepository


def checkout_settings(settings, **overrides):
    settings.CHECKOUT = {**settings.CHECKOUT, **overrides}


class TestInvoiceRepositoryProvider:
    def test_file_backend(self, invoice_dir):
        repository = get_invoice_repository()
        assert isinstance(repository, FileInvoiceRepository)
        assert repository.directory == invoice_dir

    def test_database_backend(self, settings):
        checkout_settings(settings, INVOICE_BACKEND='database')
        assert isinstance(get_invoice_repository(), DjangoInvoiceRepository)

    def test_unknown_backend(self, settings):
        checkout_settings(settings, INVOICE_BACKEND='s3')
        with pytest.raises(ImproperlyConfigured):
            get_invoice_repository()


class TestNewCart:
    def test_uses_configured_ceiling(self, settings):
        checkout_settings(settings, MAX_QUANTITY_PER_REQUEST=3)
        assert new_cart().max_quantity_per_request == 3


class TestBuildShopSession:
    def test_keeps_given_empty_cart(self):
        cart = Cart()
        assert build_shop_session(cart=cart).cart is cart

    def test_keeps_given_catalog(self):
        catalog = InMemoryCatalogRepository()
        assert build_shop_session(catalog=catalog).catalog is catalog

    def test_sessions_do_not_share_carts(self):
        assert build_shop_session().cart is not build_shop_session().cart
