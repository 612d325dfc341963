"""
Mentor reviews router package.

Exports the router for mentor review endpoints.
"""

from .mentor_reviews_router import router

__all__ = ["router"]
