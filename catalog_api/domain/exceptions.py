"""Domain exceptions.

Errors raised by the catalog core. The API layer maps them to
response envelopes; nothing below the API knows about HTTP.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ProductNotFoundError(DomainError):
    """Raised when no product with the requested ID exists."""

    def __init__(self, product_id: int | str) -> None:
        """Initialize product not found error.

        Args:
            product_id: The ID that was looked up.
        """
        super().__init__(
            "Product not found",
            details={"product_id": product_id},
        )
        self.product_id = product_id
