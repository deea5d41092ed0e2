"""
Shop session.

One shopper's view of the store: the catalog they browse, the cart they fill
and the sink their invoices go to. Sessions do not share carts.
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from apps.catalog.domain.repositories.catalog_repository import CatalogRepository
from apps.catalog.domain.value_objects.item import Item
from apps.payments.domain import PaymentProcessor, resolve_processor
from shared.application import UseCaseResult
from ..domain.entities.cart import Cart
from ..domain.repositories.invoice_repository import InvoiceRepository
from ..domain.services.pricing import Quote, quote
from .dtos import AddToCartDTO, CartDTO, CheckoutDTO, CheckoutResultDTO
from .use_cases import AddToCartUseCase, CheckoutUseCase


@dataclass
class ShopSession:
    catalog: CatalogRepository
    invoice_repository: InvoiceRepository
    cart: Cart = field(default_factory=Cart)
    resolve_payment: Callable[[Optional[str]], PaymentProcessor] = resolve_processor

    def list_products(self) -> List[Item]:
        return self.catalog.list_all()

    def add_to_cart(self, item_id: str, quantity: int) -> UseCaseResult[CartDTO]:
        use_case = AddToCartUseCase(catalog=self.catalog, cart=self.cart)
        return use_case.execute(AddToCartDTO(item_id=item_id, quantity=quantity))

    def preview(self, coupon_code: Optional[str] = None) -> Quote:
        """Price the cart without paying for it."""
        return quote(self.cart, coupon_code)

    def view_cart(self) -> CartDTO:
        return CartDTO.from_entity(self.cart)

    def clear_cart(self) -> None:
        self.cart.clear()

    def checkout(
        self,
        coupon_code: Optional[str] = None,
        payment_method: Optional[str] = None,
    ) -> UseCaseResult[CheckoutResultDTO]:
        use_case = CheckoutUseCase(
            cart=self.cart,
            invoice_repository=self.invoice_repository,
            resolve_payment=self.resolve_payment,
        )
        return use_case.execute(CheckoutDTO(coupon_code=coupon_code, payment_method=payment_method))
