"""Domain layer for the catalog."""

from catalog_api.domain.exceptions import DomainError, ProductNotFoundError

__all__ = ["DomainError", "ProductNotFoundError"]
