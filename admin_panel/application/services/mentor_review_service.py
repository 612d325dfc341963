"""
Mentor review service orchestrator.

Dependencies: admin_panel.boundary.db.CRUD, admin_panel.core
System role: Mentor review use case orchestration
"""

from sqlalchemy.ext.asyncio import AsyncSession

from admin_panel.application.services.resource_service import ResourceService
from admin_panel.boundary.db.CRUD.mentor_review_crud import mentor_review_crud
from admin_panel.boundary.db.models.mentor_review_model import MentorReviewModel
from admin_panel.core.resources import MENTOR_REVIEW_RESOURCE


class MentorReviewService(ResourceService[MentorReviewModel]):
    """Mentor review service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, mentor_review_crud, MENTOR_REVIEW_RESOURCE)
