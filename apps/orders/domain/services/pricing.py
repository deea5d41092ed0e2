"""
Pricing pipeline.

Order of operations is fixed: gross subtotal, then tax, then the
tax-inclusive base, then at most one coupon adjustment on top of the base.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from ..entities.cart import Cart
from ..exceptions import InvalidCouponError
from ..value_objects.cost_node import CostNode
from ..value_objects.coupon import resolve_coupon
from ..value_objects.price_breakdown import PriceBreakdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quote:
    """Result of pricing a cart."""
    breakdown: PriceBreakdown
    cost: CostNode
    warnings: Tuple[str, ...] = ()

    @property
    def final_amount(self) -> Decimal:
        return self.cost.amount

    @property
    def description(self) -> str:
        return self.cost.description


def price_cart(cart: Cart) -> PriceBreakdown:
    """Compute gross subtotal and tax for the cart."""
    return PriceBreakdown(gross_subtotal=cart.subtotal, total_tax=cart.tax_total)


def apply_coupon(cost: CostNode, coupon_code: Optional[str]) -> CostNode:
    """Wrap ``cost`` with the rule for ``coupon_code``.

    Raises ``InvalidCouponError`` for unknown non-empty codes.
    """
    rule = resolve_coupon(coupon_code)
    if rule is None:
        return cost
    return cost.with_adjustment(rule)


def quote(cart: Cart, coupon_code: Optional[str] = None) -> Quote:
    """Price the cart and apply the optional coupon.

    An unknown coupon does not abort pricing: the unadjusted amount is kept
    and the problem is reported in ``warnings``.
    """
    breakdown = price_cart(cart)
    cost = CostNode(base_amount=breakdown.subtotal_with_tax)
    warnings = []
    try:
        cost = apply_coupon(cost, coupon_code)
    except InvalidCouponError as e:
        logger.warning(f"Ignoring coupon {e.coupon_code!r}: {e.message}")
        warnings.append(f"Warning: {e.message}")
    return Quote(breakdown=breakdown, cost=cost, warnings=tuple(warnings))
