"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: admin_panel.application, admin_panel.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from admin_panel.boundary.db import get_async_db
from admin_panel.application.services import MentorReviewService, ProjectService


def get_project_service(db: AsyncSession = Depends(get_async_db)) -> ProjectService:
    """
    Get project service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ProjectService: Project service instance
    """
    return ProjectService(db=db)


def get_mentor_review_service(
    db: AsyncSession = Depends(get_async_db),
) -> MentorReviewService:
    """
    Get mentor review service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        MentorReviewService: Mentor review service instance
    """
    return MentorReviewService(db=db)
