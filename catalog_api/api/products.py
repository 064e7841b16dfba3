"""Product API endpoints.

Provides endpoints for listing, reading, creating, updating and
deleting catalog products.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from catalog_api.api.dependencies import get_catalog_service, get_product_query
from catalog_api.api.schemas import (
    ErrorResponse,
    FiltersSchema,
    PaginationSchema,
    ProductListResponse,
    ProductMutationResponse,
    ProductResponse,
    ProductSchema,
    ProductWriteRequest,
)
from catalog_api.catalog.params import parse_positive_int
from catalog_api.catalog.service import CatalogService, ProductQuery
from catalog_api.domain.exceptions import ProductNotFoundError

logger = structlog.get_logger()

router = APIRouter(prefix="/products", tags=["Products"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product not found"}}
AUTH_ERRORS = {
    401: {"model": ErrorResponse, "description": "Missing or malformed token"},
    403: {"model": ErrorResponse, "description": "Invalid token"},
    400: {"model": ErrorResponse, "description": "Validation failed"},
}


def _product_id(raw: str) -> int:
    # Non-numeric IDs can never match a stored product
    product_id = parse_positive_int(raw)
    if product_id is None:
        raise ProductNotFoundError(raw)
    return product_id


@router.get("", response_model=ProductListResponse)
async def list_products(
    query: Annotated[ProductQuery, Depends(get_product_query)],
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductListResponse:
    """List products with search, filtering, sorting and pagination.

    Returns:
        Page of products, pagination metadata and the filters applied.
    """
    result = service.list_products(query)
    page = result.page

    return ProductListResponse(
        data=[ProductSchema.model_validate(p) for p in page.items],
        pagination=PaginationSchema(**page.metadata()),
        filters=FiltersSchema(**result.filters),
    )


@router.get("/{product_id}", response_model=ProductResponse, responses=NOT_FOUND)
async def get_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductResponse:
    """Get a product by ID."""
    product = service.get_product(_product_id(product_id))
    return ProductResponse(data=ProductSchema.model_validate(product))


@router.post(
    "",
    response_model=ProductMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses=AUTH_ERRORS,
)
async def create_product(
    payload: ProductWriteRequest,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductMutationResponse:
    """Create a new product.

    Args:
        payload: Product fields; description and inStock are optional.

    Returns:
        The created product.
    """
    logger.info("Create product request", body=payload.model_dump(by_alias=True))

    product = service.create_product(payload.to_draft())

    return ProductMutationResponse(
        message="Product created successfully",
        data=ProductSchema.model_validate(product),
    )


@router.put(
    "/{product_id}",
    response_model=ProductMutationResponse,
    responses={**NOT_FOUND, **AUTH_ERRORS},
)
async def update_product(
    product_id: str,
    payload: ProductWriteRequest,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductMutationResponse:
    """Update a product.

    name, price and category are replaced; description and inStock
    keep their current values when omitted.
    """
    logger.info(
        "Update product request",
        product_id=product_id,
        body=payload.model_dump(by_alias=True, exclude_none=True),
    )

    product = service.update_product(_product_id(product_id), payload.to_draft())

    return ProductMutationResponse(
        message="Product updated successfully",
        data=ProductSchema.model_validate(product),
    )


@router.delete(
    "/{product_id}",
    response_model=ProductMutationResponse,
    responses={**NOT_FOUND, **AUTH_ERRORS},
)
async def delete_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductMutationResponse:
    """Delete a product and return the removed record."""
    product = service.delete_product(_product_id(product_id))

    return ProductMutationResponse(
        message="Product deleted successfully",
        data=ProductSchema.model_validate(product),
    )
