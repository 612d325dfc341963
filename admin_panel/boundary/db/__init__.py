"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - create_async_engine_from_settings(), create_session_factory(), get_async_db():
    Async connection management
  - create_all_tables(): Idempotent schema bootstrap
  - build_partial_update(): Sparse UPDATE construction
  - ProjectModel, MentorReviewModel: Resource tables
  - project_crud, mentor_review_crud: CRUD operation singletons

Dependencies: sqlalchemy, admin_panel.configs
System role: Database adapter providing persistent storage for projects
and mentor reviews.
"""

from admin_panel.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from admin_panel.boundary.db.connection import (
    create_async_engine_from_settings,
    create_session_factory,
    get_async_db,
)
from admin_panel.boundary.db.create_tables import create_all_tables
from admin_panel.boundary.db.statements import build_partial_update
from admin_panel.boundary.db.models import MentorReviewModel, ProjectModel
from admin_panel.boundary.db.CRUD import (
    BaseCRUD,
    MentorReviewCRUD,
    ProjectCRUD,
    mentor_review_crud,
    project_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "create_async_engine_from_settings",
    "create_session_factory",
    "get_async_db",
    # Schema and statements
    "create_all_tables",
    "build_partial_update",
    # Models
    "ProjectModel",
    "MentorReviewModel",
    # CRUD classes
    "BaseCRUD",
    "ProjectCRUD",
    "MentorReviewCRUD",
    # CRUD singletons
    "project_crud",
    "mentor_review_crud",
]
