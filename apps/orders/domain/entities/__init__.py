# Domain entities
from .cart import Cart, DEFAULT_MAX_QUANTITY_PER_REQUEST
from .cart_line import CartLine
from .invoice import Invoice, InvoiceLine

__all__ = ['Cart', 'CartLine', 'DEFAULT_MAX_QUANTITY_PER_REQUEST', 'Invoice', 'InvoiceLine']
