"""
Payment processors.

Each supported method name maps directly to a processor. Charging is a
simulated side effect: it logs the charge and returns nothing.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, Optional

from shared.domain import formatted

logger = logging.getLogger(__name__)


def _charge_card(amount: Decimal) -> None:
    logger.info(f"Processing Credit Card charge: {formatted(amount)}")


def _charge_upi(amount: Decimal) -> None:
    logger.info(f"Processing UPI transaction: {formatted(amount)}")


@dataclass(frozen=True)
class PaymentProcessor:
    """A named payment method and the handler that charges it."""
    method: str
    handler: Callable[[Decimal], None]

    def charge(self, amount: Decimal) -> None:
        self.handler(amount)


PROCESSORS: Dict[str, PaymentProcessor] = {
    'CARD': PaymentProcessor('CARD', _charge_card),
    'UPI': PaymentProcessor('UPI', _charge_upi),
}

DEFAULT_METHOD = 'CARD'


def resolve_processor(method: Optional[str]) -> PaymentProcessor:
    """Find the processor for ``method`` (case-insensitive).

    Unknown or empty method names fall back to the card processor.
    """
    key = (method or '').strip().upper()
    processor = PROCESSORS.get(key)
    if processor is None:
        logger.warning(f"Unknown payment method {method!r}, defaulting to {DEFAULT_METHOD}")
        processor = PROCESSORS[DEFAULT_METHOD]
    return processor
