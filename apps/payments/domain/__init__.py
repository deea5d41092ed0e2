# Payment dispatch
from .processors import (
    DEFAULT_METHOD,
    PROCESSORS,
    PaymentProcessor,
    resolve_processor,
)

__all__ = ['DEFAULT_METHOD', 'PROCESSORS', 'PaymentProcessor', 'resolve_processor']
