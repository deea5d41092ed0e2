"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code=code,
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: str = None):
        super().__init__(message=message, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule


class InsufficientStockError(DomainException):
    """Raised when stock is insufficient."""

    def __init__(self, item_id: str, requested: int, available: int, code: str = "INSUFFICIENT_STOCK"):
        super().__init__(
            message=f"Insufficient stock for item '{item_id}': requested {requested}, available {available}",
            code=code,
        )
        self.item_id = item_id
        self.requested = requested
        self.available = available


class InfrastructureError(DomainException):
    """Raised when an external collaborator (file system, database) fails."""

    def __init__(self, message: str, code: str = "INFRASTRUCTURE_ERROR"):
        super().__init__(message=message, code=code)
