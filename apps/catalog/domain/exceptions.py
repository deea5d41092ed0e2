"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import (
    EntityNotFoundError,
    InfrastructureError,
    ValidationError,
)


class InvalidItemError(ValidationError):
    """Raised when item data is invalid."""

    def __init__(self, message: str, field: str = "item"):
        super().__init__(message=message, field=field, code="INVALID_ITEM")


class ItemNotFoundError(EntityNotFoundError):
    """Raised when an item id is not in the catalog."""

    def __init__(self, item_id: str):
        super().__init__(entity_name="Item", entity_id=item_id, code="ITEM_NOT_FOUND")


class CatalogLoadError(InfrastructureError):
    """Raised when the catalog source cannot be read or contains bad rows."""

    def __init__(self, message: str, source: str = None, line: int = None):
        location = ""
        if source:
            location = f" ({source}" + (f", line {line}" if line is not None else "") + ")"
        super().__init__(message=f"{message}{location}", code="CATALOG_LOAD_ERROR")
        self.source = source
        self.line = line
