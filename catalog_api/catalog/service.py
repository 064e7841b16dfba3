"""Catalog service.

Read path: the query pipeline (filter, sort, paginate) over a store
snapshot. Write path: create, update and delete, each a single atomic
store operation.
"""

from dataclasses import dataclass, field
from typing import Any

import structlog

from catalog_api.catalog.filters import FilterParams, apply_filters, build_filters
from catalog_api.catalog.models import Product, ProductDraft
from catalog_api.catalog.pagination import Page, PageRequest, paginate
from catalog_api.catalog.sorting import sort_products
from catalog_api.catalog.store import CatalogStore

logger = structlog.get_logger()


@dataclass(frozen=True)
class ProductQuery:
    """Raw list parameters, exactly as received.

    Attributes:
        filters: Filter parameters.
        sort: Field to sort by.
        order: "asc" or "desc".
        page: Page number.
        limit: Items per page.
    """

    filters: FilterParams = field(default_factory=FilterParams)
    sort: str | None = None
    order: str | None = None
    page: str | None = None
    limit: str | None = None


@dataclass(frozen=True)
class ProductListResult:
    """Result of a list query.

    Attributes:
        page: The requested window of matching products.
        filters: Recognised filters echoed back to the caller.
    """

    page: Page[Product]
    filters: dict[str, Any]


class CatalogService:
    """Service for catalog operations.

    Example usage:
        service = CatalogService(get_catalog_store())
        result = service.list_products(
            ProductQuery(filters=FilterParams(category="Electronics"), sort="price")
        )
        created = service.create_product(
            ProductDraft(name="Lamp", price=25.0, category="Home")
        )
    """

    def __init__(self, store: CatalogStore) -> None:
        """Initialize service with a catalog store.

        Args:
            store: Store holding the products.
        """
        self.store = store

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_products(self, query: ProductQuery) -> ProductListResult:
        """Search, filter, sort and paginate the catalog.

        Args:
            query: Raw list parameters.

        Returns:
            Page of products with pagination metadata and filter echo.
        """
        filtered = apply_filters(self.store.list(), build_filters(query.filters))
        ordered = sort_products(filtered, query.sort, query.order)
        page = paginate(ordered, PageRequest.from_raw(query.page, query.limit))

        return ProductListResult(page=page, filters=query.filters.echo())

    def get_product(self, product_id: int) -> Product:
        """Get a product by ID.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        return self.store.get(product_id)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_product(self, draft: ProductDraft) -> Product:
        """Create a product from a validated draft."""
        product = self.store.insert(draft)
        logger.info("product_created", product_id=product.id, name=product.name)
        return product

    def update_product(self, product_id: int, draft: ProductDraft) -> Product:
        """Update a product from a validated draft.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        product = self.store.replace(product_id, draft)
        logger.info("product_updated", product_id=product.id)
        return product

    def delete_product(self, product_id: int) -> Product:
        """Delete a product and return the removed record.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        product = self.store.remove(product_id)
        logger.info("product_deleted", product_id=product.id)
        return product
