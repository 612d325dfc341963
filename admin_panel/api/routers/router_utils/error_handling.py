"""
Resource error handling utilities.

Provides a decorator for consistent error handling across the project
and mentor review endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from admin_panel.core.exceptions import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_resource_errors(func: F) -> F:
    """
    Decorator to transform domain errors into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (resource, id, field)
    - Mapping domain exceptions to HTTP status codes
    - Ensuring uniform error response formats

    Anything that is not a domain error propagates to the application's
    catch-all handler.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except NotFoundError as e:
            logger.warning(
                "Resource not found",
                extra={"resource": e.resource, "id": e.record_id}
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={"message": e.message}
            ) from e

        except ValidationError as e:
            logger.warning(
                "Invalid request",
                extra={"field": e.field, "error": e.message}
            )
            detail = {"message": e.message}
            if e.field:
                detail["field"] = e.field
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=detail
            ) from e

        except StoreError as e:
            # Full detail was logged where the store error was caught
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={"message": e.message}
            ) from e

    return wrapper # type: ignore
