"""
Application-level exception handlers.

Renders every error as {"success": false, "message": ...}. Domain errors
reach here as HTTPExceptions raised by handle_resource_errors; anything
unhandled becomes a 500 whose detail is only revealed in development.

Dependencies: fastapi, starlette, admin_panel.configs
System role: Uniform HTTP error bodies
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from admin_panel.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, body: ErrorResponse, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPExceptions, including the router's own 404/405."""
    if isinstance(exc.detail, dict):
        body = ErrorResponse(**exc.detail)
    elif exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        # A known path with an unsupported method is an unmatched route too
        return _error_response(
            status.HTTP_404_NOT_FOUND, ErrorResponse(message="Route not found")
        )
    else:
        body = ErrorResponse(message=str(exc.detail))
    return _error_response(exc.status_code, body, getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors like any other validation failure."""
    logger.warning(
        "Malformed request body",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(message="Request body must be a JSON object"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and answer 500, leaking detail only in development."""
    logger.exception(
        "Unhandled error",
        extra={"method": request.method, "path": request.url.path},
    )
    settings = request.app.state.settings
    error = str(exc) if settings.is_development else "Internal server error"
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(message="Something went wrong", error=error),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to `app`."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
