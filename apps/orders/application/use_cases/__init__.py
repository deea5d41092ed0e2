from .add_to_cart import AddToCartUseCase
from .checkout import CheckoutState, CheckoutUseCase

__all__ = ['AddToCartUseCase', 'CheckoutState', 'CheckoutUseCase']
