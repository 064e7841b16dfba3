"""API schemas for the Catalog API.

Pydantic models for request validation and the response envelope.
Public field names are camelCase (``inStock``, ``createdAt``).
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel

from catalog_api.catalog.models import ProductDraft


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Failure envelope.

    All API errors follow this format for consistency.
    """

    success: bool = False
    message: str = Field(..., description="Human-readable error message")
    errors: list[ErrorDetail] | None = Field(
        default=None, description="Field-level validation errors"
    )


class PaginationSchema(CamelModel):
    """Pagination metadata for a list response."""

    page: int = Field(..., description="Current page number (1-based)")
    limit: int = Field(..., description="Items per page")
    total: int = Field(..., description="Matching items before pagination")
    total_pages: int = Field(..., description="Number of pages")


class FiltersSchema(CamelModel):
    """Filters recognised in a list request."""

    search: str | None = None
    category: str | None = None
    in_stock: str | None = None
    min_price: str | None = None
    max_price: str | None = None


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(CamelModel):
    """Product representation."""

    id: int
    name: str
    price: float
    category: str
    description: str
    in_stock: bool
    created_at: datetime
    updated_at: datetime | None = None


# JSON numbers only; booleans and numeric strings are rejected
Price = (
    Annotated[StrictFloat, Field(ge=0, allow_inf_nan=False)]
    | Annotated[StrictInt, Field(ge=0)]
)


class ProductWriteRequest(CamelModel):
    """Request body for creating or updating a product."""

    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    price: Price = Field(..., description="Unit price")
    category: str = Field(..., min_length=1, max_length=100, description="Category name")
    description: str | None = Field(default=None, description="Free-text description")
    in_stock: StrictBool | None = Field(default=None, description="Availability flag")

    def to_draft(self) -> ProductDraft:
        """Convert to the store's write payload."""
        return ProductDraft(
            name=self.name,
            price=float(self.price),
            category=self.category,
            description=self.description,
            in_stock=self.in_stock,
        )


class ProductResponse(BaseModel):
    """Single-product envelope."""

    success: bool = True
    data: ProductSchema


class ProductMutationResponse(ProductResponse):
    """Single-product envelope for writes."""

    message: str


class ProductListResponse(BaseModel):
    """Paginated product list envelope."""

    success: bool = True
    data: list[ProductSchema]
    pagination: PaginationSchema
    filters: FiltersSchema
