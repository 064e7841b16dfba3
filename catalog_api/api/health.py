"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from catalog_api.api.dependencies import get_catalog_service
from catalog_api.catalog.service import CatalogService
from catalog_api.infrastructure.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class StatsResponse(BaseModel):
    """Store statistics response."""

    service: str
    product_count: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check() -> dict[str, str]:
    """Check if service is ready to accept requests."""
    return {"status": "ready"}


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> StatsResponse:
    """Get catalog statistics."""
    return StatsResponse(
        service=settings.service_name,
        product_count=service.store.count(),
    )
