# Value objects
from .tax_rate import DEFAULT_TAX_RATE, TAX_RATES_BY_CATEGORY, tax_rate_for
from .item import Item

__all__ = ['DEFAULT_TAX_RATE', 'TAX_RATES_BY_CATEGORY', 'tax_rate_for', 'Item']
