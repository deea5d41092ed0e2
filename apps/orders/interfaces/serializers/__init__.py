from .cart_serializer import CartSerializer, CartLineSerializer, CartLineCreateSerializer
from .checkout_serializer import CheckoutRequestSerializer, CheckoutResultSerializer

__all__ = [
    'CartSerializer',
    'CartLineSerializer',
    'CartLineCreateSerializer',
    'CheckoutRequestSerializer',
    'CheckoutResultSerializer',
]
