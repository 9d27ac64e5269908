"""
Domain errors raised by the product service.

Validation errors (MissingField, InvalidField) are raised before the store
is touched. NotFound comes from a missing row or a zero-row write, never
from a driver exception. StorageError wraps anything the database layer
raises unexpectedly.
"""


class ProductError(Exception):
    """Base class for every product-service error."""


class MissingField(ProductError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field '{field}' is required")


class InvalidField(ProductError):
    def __init__(self, field: str, reason: str = ""):
        self.field = field
        self.reason = reason
        message = f"Field '{field}' is invalid"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NotFound(ProductError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class StorageError(ProductError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Storage failure: {cause}")
