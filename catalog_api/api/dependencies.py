"""FastAPI dependencies for the catalog routes."""

from typing import Annotated

from fastapi import Query

from catalog_api.catalog.filters import FilterParams
from catalog_api.catalog.service import CatalogService, ProductQuery
from catalog_api.catalog.store import get_catalog_store
from catalog_api.infrastructure.config import settings


def get_catalog_service() -> CatalogService:
    """Get catalog service dependency."""
    return CatalogService(get_catalog_store(seed=settings.seed_catalog))


def get_product_query(
    q: Annotated[str | None, Query(description="Search in name/description")] = None,
    category: Annotated[str | None, Query(description="Category, case-insensitive")] = None,
    in_stock: Annotated[str | None, Query(alias="inStock", description="true or false")] = None,
    min_price: Annotated[str | None, Query(alias="minPrice")] = None,
    max_price: Annotated[str | None, Query(alias="maxPrice")] = None,
    sort: Annotated[str | None, Query(description="Field to sort by")] = None,
    order: Annotated[str | None, Query(description="asc or desc")] = None,
    page: Annotated[str | None, Query(description="Page number (1-based)")] = None,
    limit: Annotated[str | None, Query(description="Items per page")] = None,
) -> ProductQuery:
    """Collect list parameters as raw strings.

    Coercion happens in the catalog layer so that bad values fall back
    to defaults instead of failing request validation.
    """
    return ProductQuery(
        filters=FilterParams(
            search=q,
            category=category,
            in_stock=in_stock,
            min_price=min_price,
            max_price=max_price,
        ),
        sort=sort,
        order=order,
        page=page,
        limit=limit,
    )
