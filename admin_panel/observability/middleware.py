"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, admin_panel.observability
System role: Request/response observability injection
"""

import logging
import time
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from admin_panel.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

RESOURCES = ("projects", "mentor-reviews", "health")


def resource_of(path: str) -> str | None:
    """Name the resource a path addresses, ignoring the /api alias prefix."""
    segments = [s for s in path.split("/") if s]
    if segments and segments[0] == "api":
        segments = segments[1:]
    if segments and segments[0] in RESOURCES:
        return segments[0]
    return None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    One access line per request, tagged with the addressed resource.

    Client errors log at WARNING and server errors at ERROR so failed
    admin actions stand out from routine listing traffic.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        path = request.url.path
        resource = resource_of(path)

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} raised {type(e).__name__}",
                extra={
                    "method": method,
                    "path": path,
                    "resource": resource,
                    "error_type": type(e).__name__,
                    "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
            raise

        status_code = response.status_code
        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            f"{method} {path} -> {status_code}",
            extra={
                "method": method,
                "path": path,
                "resource": resource,
                "status_code": status_code,
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get("X-Correlation-ID"))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers["X-Correlation-ID"] = correlation_id
        return response
