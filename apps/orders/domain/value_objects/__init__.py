# Value objects
from .order_number import OrderNumber
from .price_breakdown import PriceBreakdown
from .cost_node import Adjustment, CostNode, FlatOff, PercentageOff
from .coupon import COUPON_RULES, resolve_coupon

__all__ = [
    'OrderNumber',
    'PriceBreakdown',
    'Adjustment',
    'CostNode',
    'FlatOff',
    'PercentageOff',
    'COUPON_RULES',
    'resolve_coupon',
]
