# Shared domain module
from .base_entity import BaseEntity, utc_now
from .base_value_object import ValueObject
from .money import to_decimal, quantize, formatted
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    BusinessRuleViolationError,
    InsufficientStockError,
    InfrastructureError,
)

__all__ = [
    'BaseEntity',
    'ValueObject',
    'utc_now',
    'to_decimal',
    'quantize',
    'formatted',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'BusinessRuleViolationError',
    'InsufficientStockError',
    'InfrastructureError',
]
