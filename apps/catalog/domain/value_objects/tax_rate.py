"""
GST classification by item category.
"""
from decimal import Decimal
from typing import Mapping

# Percent, keyed by lower-cased category name.
TAX_RATES_BY_CATEGORY: Mapping[str, Decimal] = {
    'electronics': Decimal('18'),
    'books': Decimal('5'),
}

DEFAULT_TAX_RATE = Decimal('5')


def tax_rate_for(category: str) -> Decimal:
    """Return the tax rate (percent) for a category; unknown categories get the default."""
    return TAX_RATES_BY_CATEGORY.get((category or '').strip().lower(), DEFAULT_TAX_RATE)
