"""Catalog API main application module.

This module initializes the FastAPI application and configures
logging, middleware, routers and exception handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.api.health import router as health_router
from catalog_api.api.middleware import error_response, setup_middleware
from catalog_api.api.products import router as products_router
from catalog_api.api.schemas import ErrorDetail, ErrorResponse
from catalog_api.catalog.store import get_catalog_store, reset_catalog_store
from catalog_api.domain.exceptions import DomainError, ProductNotFoundError
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    configure_logging(settings.log_level, json=settings.log_json)
    logger.info(
        "Starting Catalog API",
        version=settings.api_version,
        api_prefix=settings.api_prefix,
        auth_configured=bool(settings.api_token),
    )

    reset_catalog_store()
    store = get_catalog_store(seed=settings.seed_catalog)
    logger.info("Catalog initialized", product_count=store.count(), next_id=store.next_id)

    yield

    # Shutdown
    logger.info("Shutting down Catalog API")


app = FastAPI(
    title="Catalog API",
    description="In-memory product catalog with search, filtering and pagination",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Setup custom middleware (request logging, token auth, error handling)
setup_middleware(app)

# CORS middleware (added last so it runs first, before auth sees preflights)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router, prefix=settings.api_prefix)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to failure envelopes."""
    if isinstance(exc, ProductNotFoundError):
        logger.info("Product not found", product_id=exc.product_id)
        return error_response(status.HTTP_404_NOT_FOUND, exc.message)

    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report payload validation failures as 400 with field details."""
    errors = [
        ErrorDetail(
            field=".".join(str(part) for part in error["loc"] if part != "body") or None,
            message=error["msg"],
        )
        for error in exc.errors()
    ]
    logger.info("Validation failed", path=request.url.path, error_count=len(errors))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(message="Validation failed", errors=errors).model_dump(
            exclude_none=True
        ),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions with the failure envelope."""
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)
