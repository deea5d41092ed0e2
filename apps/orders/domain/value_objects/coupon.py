"""
Coupon codes and the promotion rule each one maps to.
"""
from decimal import Decimal
from typing import Mapping, Optional

from ..exceptions import InvalidCouponError
from .cost_node import Adjustment, FlatOff, PercentageOff

COUPON_RULES: Mapping[str, Adjustment] = {
    'SAVE10': PercentageOff(Decimal('10')),
    'FLAT50': FlatOff(Decimal('50')),
}


def normalize_coupon_code(code: Optional[str]) -> str:
    return (code or '').strip().upper()


def resolve_coupon(code: Optional[str]) -> Optional[Adjustment]:
    """Map a coupon code to its rule.

    Codes are case-insensitive. An empty code means no adjustment; any other
    unknown code raises ``InvalidCouponError``.
    """
    normalized = normalize_coupon_code(code)
    if not normalized:
        return None
    rule = COUPON_RULES.get(normalized)
    if rule is None:
        raise InvalidCouponError(code)
    return rule
