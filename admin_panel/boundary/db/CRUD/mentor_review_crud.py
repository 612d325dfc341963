"""
Mentor review CRUD operations.

Dependencies: admin_panel.boundary.db.models
System role: Mentor review persistence operations
"""

from admin_panel.boundary.db.models.mentor_review_model import MentorReviewModel
from admin_panel.boundary.db.CRUD.base_crud import BaseCRUD


class MentorReviewCRUD(BaseCRUD[MentorReviewModel]):
    """CRUD operations for MentorReviewModel."""

    def __init__(self) -> None:
        """Initialize MentorReviewCRUD with MentorReviewModel."""
        super().__init__(MentorReviewModel)


mentor_review_crud = MentorReviewCRUD()
