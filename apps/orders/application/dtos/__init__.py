from .cart_dto import AddToCartDTO, CartDTO, CartLineDTO
from .checkout_dto import CheckoutDTO, CheckoutResultDTO

__all__ = ['AddToCartDTO', 'CartDTO', 'CartLineDTO', 'CheckoutDTO', 'CheckoutResultDTO']
