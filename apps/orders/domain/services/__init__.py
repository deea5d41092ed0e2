# Domain services
from .pricing import Quote, apply_coupon, price_cart, quote

__all__ = ['Quote', 'apply_coupon', 'price_cart', 'quote']
