"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from admin_panel.boundary.db.CRUD import project_crud

    project = await project_crud.get_by_id(db, project_id)
"""

from admin_panel.boundary.db.CRUD.base_crud import BaseCRUD
from admin_panel.boundary.db.CRUD.project_crud import ProjectCRUD, project_crud
from admin_panel.boundary.db.CRUD.mentor_review_crud import (
    MentorReviewCRUD,
    mentor_review_crud,
)

__all__ = [
    "BaseCRUD",
    "ProjectCRUD",
    "project_crud",
    "MentorReviewCRUD",
    "mentor_review_crud",
]
