"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_mentor_review_service,
    get_project_service,
)

__all__ = [
    "get_mentor_review_service",
    "get_project_service",
]
