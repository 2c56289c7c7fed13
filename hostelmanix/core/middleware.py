"""
Core middleware and exception handler registration for the FastAPI application.

This module provides middleware components for request tracking, timing,
security headers and error logging, plus the handlers that render
application and database exceptions as JSON error bodies.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from hostelmanix.config.logging import get_logger, request_id_var
from hostelmanix.core.exceptions import BaseAppException

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each incoming request.

    The request ID is:
    - Stored in request.state.request_id
    - Bound to the logging context for the duration of the request
    - Added to response headers as X-Request-ID
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that measures and logs request processing time.

    Adds X-Process-Time header to responses with the processing duration in seconds.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({process_time:.4f}s)",
            extra={
                "request_id": getattr(request.state, "request_id", "-"),
                "method": request.method,
                "url": str(request.url.path),
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
                "client_host": request.client.host if request.client else None,
            }
        )

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds common security headers to all responses.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"

        return response


class ErrorLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs errors and exceptions during request processing.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request processing failed: {str(exc)}",
                extra={
                    "request_id": getattr(request.state, "request_id", "-"),
                    "method": request.method,
                    "url": str(request.url.path),
                    "error_type": type(exc).__name__,
                },
                exc_info=True
            )
            raise

        if response.status_code >= 500:
            logger.warning(
                f"Request returned error status {response.status_code}",
                extra={
                    "request_id": getattr(request.state, "request_id", "-"),
                    "method": request.method,
                    "url": str(request.url.path),
                    "status_code": response.status_code,
                }
            )

        return response


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    """Render application exceptions with their own status code"""
    logger.warning(
        f"Application exception: {exc.error_code.value} - {exc.message}",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Render database exceptions that escaped the service layer"""
    if isinstance(exc, IntegrityError):
        error_code = "DUPLICATE_ENTRY"
        message = "Database integrity constraint violation"
        status_code = status.HTTP_409_CONFLICT
    else:
        error_code = "DATABASE_ERROR"
        message = "Database operation failed"
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.error(
        f"Database exception: {error_code}",
        extra={"path": request.url.path, "method": request.method},
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "message": message,
                "code": error_code,
                "details": {},
                "type": type(exc).__name__,
            }
        },
    )


def register_middlewares(app: FastAPI, include_security: bool = True) -> None:
    """
    Register all core middlewares to the FastAPI application.

    Middlewares are registered in reverse order of execution (LIFO).
    The last middleware added is the first one to process the request.
    """
    app.add_middleware(ErrorLoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    if include_security:
        app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error renderers"""
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)


__all__ = [
    "RequestIDMiddleware",
    "TimingMiddleware",
    "SecurityHeadersMiddleware",
    "ErrorLoggingMiddleware",
    "register_middlewares",
    "register_exception_handlers",
]
