"""
Projects router package.

Exports the router for project management endpoints.
"""

from .projects_router import router

__all__ = ["router"]
