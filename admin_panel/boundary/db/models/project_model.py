"""
Project ORM model.

Represents a mentored project listed in the admin panel.

Dependencies: sqlalchemy, admin_panel.boundary.db.base
System role: Project persistence
"""

from sqlalchemy import CheckConstraint, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from admin_panel.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class ProjectModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Project ORM model.

    Attributes:
        id: Integer primary key (server-assigned)
        title: Project title (non-empty)
        mentor: Mentor name (non-empty)
        students: Number of enrolled students, never negative
        created_at: Project creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint("students >= 0", name="ck_projects_students_non_negative"),
        {"sqlite_autoincrement": True},
    )

    title: Mapped[str] = mapped_column(Text, nullable=False, doc="Project title")

    mentor: Mapped[str] = mapped_column(Text, nullable=False, doc="Mentor name")

    students: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
        doc="Enrolled student count",
    )
