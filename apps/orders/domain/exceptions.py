"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    InfrastructureError,
    InsufficientStockError,
    ValidationError,
)


class InvalidQuantityError(ValidationError):
    """Raised when a quantity is not a positive integer."""

    def __init__(self, quantity: int):
        super().__init__(
            message=f"Quantity must be a positive whole number, got {quantity!r}",
            field="quantity",
            code="INVALID_QUANTITY",
        )
        self.quantity = quantity


class OutOfStockError(InsufficientStockError):
    """Raised when a request exceeds the per-request stock ceiling."""

    def __init__(self, item_id: str, requested: int, available: int):
        super().__init__(
            item_id=item_id,
            requested=requested,
            available=available,
            code="OUT_OF_STOCK",
        )


class InvalidCouponError(ValidationError):
    """Raised when a non-empty coupon code is not recognized."""

    def __init__(self, coupon_code: str):
        super().__init__(
            message="Coupon code invalid.",
            field="coupon_code",
            code="INVALID_COUPON",
        )
        self.coupon_code = coupon_code


class InvalidAdjustmentError(ValidationError):
    """Raised when a promotion rule is defined with out-of-range values."""

    def __init__(self, message: str):
        super().__init__(message=message, field="adjustment", code="INVALID_ADJUSTMENT")


class InvoicePersistenceError(InfrastructureError):
    """Raised when an invoice cannot be written to its sink."""

    def __init__(self, order_number: str, reason: str):
        super().__init__(
            message=f"Error generating invoice {order_number}: {reason}",
            code="INVOICE_PERSISTENCE_FAILED",
        )
        self.order_number = order_number
        self.reason = reason
