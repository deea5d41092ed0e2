"""
Order number value object.
"""
import random
import string
import time
from dataclasses import dataclass

from shared.domain import ValueObject


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Order number value object."""
    value: str

    @classmethod
    def generate(cls) -> 'OrderNumber':
        """Generate a new order number from the clock plus a random suffix."""
        millis = time.time_ns() // 1_000_000
        random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=4))
        return cls(value=f"ORD-{millis}-{random_part}")

    def __str__(self) -> str:
        return self.value
