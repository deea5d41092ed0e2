"""
Promotion chain.

A ``CostNode`` is a base amount plus an ordered tuple of adjustment rules.
Rules are applied left to right over a running amount, so a node with N
rules is the N-th link of a chain whose first link is the bare base amount.
New rule types only need an ``apply`` method and a ``description``.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple, Union

from shared.domain import ValueObject, to_decimal
from ..exceptions import InvalidAdjustmentError

ZERO = Decimal('0')
HUNDRED = Decimal('100')


def _rule_amount(value, label: str) -> Decimal:
    try:
        amount = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAdjustmentError(f"{label} must be a number, got {value!r}")
    if not amount.is_finite():
        raise InvalidAdjustmentError(f"{label} must be finite, got {value!r}")
    return amount


@dataclass(frozen=True)
class PercentageOff(ValueObject):
    """Take ``percent`` percent off the running amount."""
    percent: Decimal

    def __post_init__(self):
        percent = _rule_amount(self.percent, "Percentage")
        if not ZERO <= percent <= HUNDRED:
            raise InvalidAdjustmentError(f"Percentage must be between 0 and 100, got {percent}")
        object.__setattr__(self, 'percent', percent)

    def apply(self, amount: Decimal) -> Decimal:
        return amount * (1 - self.percent / HUNDRED)

    @property
    def description(self) -> str:
        return f"Applied {self.percent:g}% Discount"


@dataclass(frozen=True)
class FlatOff(ValueObject):
    """Take a fixed amount off, never going below zero."""
    amount: Decimal

    def __post_init__(self):
        amount = _rule_amount(self.amount, "Flat discount")
        if amount < ZERO:
            raise InvalidAdjustmentError(f"Flat discount cannot be negative, got {amount}")
        object.__setattr__(self, 'amount', amount)

    def apply(self, amount: Decimal) -> Decimal:
        return max(ZERO, amount - self.amount)

    @property
    def description(self) -> str:
        return f"Applied Flat ${self.amount:.2f} Off"


Adjustment = Union[PercentageOff, FlatOff]


@dataclass(frozen=True)
class CostNode(ValueObject):
    """Immutable amount plus the adjustments that produced it."""
    base_amount: Decimal
    adjustments: Tuple[Adjustment, ...] = ()
    label: str = "Subtotal"

    def __post_init__(self):
        object.__setattr__(self, 'base_amount', to_decimal(self.base_amount))
        object.__setattr__(self, 'adjustments', tuple(self.adjustments))

    def with_adjustment(self, adjustment: Adjustment) -> 'CostNode':
        """Return a new node wrapping this one with one more rule."""
        return CostNode(
            base_amount=self.base_amount,
            adjustments=self.adjustments + (adjustment,),
            label=self.label,
        )

    @property
    def wrapped(self) -> Optional['CostNode']:
        """The node this one decorates, or None for the terminal node."""
        if not self.adjustments:
            return None
        return CostNode(
            base_amount=self.base_amount,
            adjustments=self.adjustments[:-1],
            label=self.label,
        )

    @property
    def is_terminal(self) -> bool:
        return not self.adjustments

    @property
    def amount(self) -> Decimal:
        """Amount after applying every adjustment in order."""
        amount = self.base_amount
        for adjustment in self.adjustments:
            amount = adjustment.apply(amount)
        return amount

    @property
    def description(self) -> str:
        """Label followed by each applied rule, in application order."""
        return " + ".join([self.label] + [a.description for a in self.adjustments])
