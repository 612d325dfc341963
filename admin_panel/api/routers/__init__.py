"""API routers."""

from .health import router as health_router
from .mentor_reviews import router as mentor_reviews_router
from .projects import router as projects_router

__all__ = [
    "health_router",
    "mentor_reviews_router",
    "projects_router",
]
