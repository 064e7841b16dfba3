"""API middleware for the Catalog API.

Provides:
- Request logging with request ID correlation
- Bearer token authentication for write methods
- Error handling
"""

import hmac
import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.api.schemas import ErrorResponse
from catalog_api.infrastructure.config import settings

logger = structlog.get_logger()


def error_response(status_code: int, message: str, **kwargs) -> JSONResponse:
    """Build a failure envelope response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(exclude_none=True),
        **kwargs,
    )


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log requests and add a request ID for correlation.

    Generates or extracts a request ID and adds it to:
    - Request state for access in handlers
    - Response headers for client correlation
    - Log context for tracing
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request with correlation ID.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response with request ID header.
        """
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        client_ip = request.client.host if request.client else None
        start_time = time.perf_counter()
        response = None

        try:
            response = await call_next(request)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                query=str(request.url.query) or None,
                client_ip=client_ip,
                status_code=getattr(response, "status_code", 500),
                duration_ms=round(duration_ms, 2),
            )

            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[self.HEADER_NAME] = request_id

        return response


# ============================================================================
# API Token Authentication Middleware
# ============================================================================


# Methods that don't require authentication
PUBLIC_METHODS = {"GET"}


class ApiTokenMiddleware(BaseHTTPMiddleware):
    """Middleware for bearer token authentication.

    Reads pass through. Every other method needs
    "Authorization: Bearer <token>" matching the configured API token.
    A missing or malformed header is 401; a wrong token, or no token
    configured on the server, is 403.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Validate the bearer token for write requests.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or 401/403 error.
        """
        if request.method in PUBLIC_METHODS:
            return await call_next(request)

        path = request.url.path
        auth_header = request.headers.get("Authorization")

        parts = auth_header.split(" ", 1) if auth_header else []
        if len(parts) != 2 or parts[0].lower() != "bearer":
            logger.warning(
                "Missing or malformed authorization header",
                path=path,
                method=request.method,
            )
            return error_response(
                status.HTTP_401_UNAUTHORIZED,
                "Authentication required. Please provide a valid Bearer token.",
                headers={"WWW-Authenticate": "Bearer"},
            )

        token = parts[1].strip()
        expected = settings.api_token

        if not expected or not hmac.compare_digest(token.encode(), expected.encode()):
            logger.warning(
                "Invalid API token",
                path=path,
                method=request.method,
                token_configured=bool(expected),
            )
            return error_response(status.HTTP_403_FORBIDDEN, "Invalid or expired token")

        request.state.authenticated = True

        return await call_next(request)


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware for consistent error handling.

    Catches unhandled exceptions and returns the failure envelope.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Handle errors uniformly.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or error response.
        """
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )

            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Internal server error",
            )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    # Error handling (innermost, wraps the router)
    app.add_middleware(ErrorHandlerMiddleware)

    # Bearer token authentication
    app.add_middleware(ApiTokenMiddleware)

    # Request logging and ID correlation (outermost, sees auth rejections)
    app.add_middleware(RequestLoggingMiddleware)
