"""
Database models package.

Exports:
  - ProjectModel: Project ORM model
  - MentorReviewModel: Mentor review ORM model

Dependencies: sqlalchemy, admin_panel.boundary.db.base
System role: Database model definitions for domain entities
"""

from admin_panel.boundary.db.models.project_model import ProjectModel
from admin_panel.boundary.db.models.mentor_review_model import MentorReviewModel

__all__ = [
    "ProjectModel",
    "MentorReviewModel",
]
