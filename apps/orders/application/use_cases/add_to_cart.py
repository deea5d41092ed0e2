"""
Add to cart use case.
"""
import logging
from dataclasses import dataclass

from apps.catalog.domain.repositories.catalog_repository import CatalogRepository
from shared.application import UseCase, UseCaseResult
from ...domain.entities.cart import Cart
from ..dtos.cart_dto import AddToCartDTO, CartDTO

logger = logging.getLogger(__name__)


@dataclass
class AddToCartUseCase(UseCase[AddToCartDTO, CartDTO]):
    """Use case for adding a catalog item to the cart."""

    catalog: CatalogRepository
    cart: Cart

    def execute(self, input_dto: AddToCartDTO) -> UseCaseResult[CartDTO]:
        # Both lookups and quantity checks raise before the cart changes
        item = self.catalog.get(input_dto.item_id)
        self.cart.add_line(item, input_dto.quantity)

        logger.info(f"Added {input_dto.quantity} x {item.id} to cart {self.cart.id}")
        return UseCaseResult.ok(CartDTO.from_entity(self.cart))
