"""
Mentor review ORM model.

Dependencies: sqlalchemy, admin_panel.boundary.db.base
System role: Mentor review persistence
"""

from sqlalchemy import CheckConstraint, Numeric, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from admin_panel.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class MentorReviewModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Mentor review ORM model.

    Rating is stored as NUMERIC(3,2) and read back as float.

    Attributes:
        id: Integer primary key (server-assigned)
        mentor: Reviewed mentor's name
        feedback: Free-text feedback
        rating: Score in [0, 5] with two-digit precision
        created_at: Review creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "mentor_reviews"
    __table_args__ = (
        CheckConstraint(
            "rating >= 0 AND rating <= 5", name="ck_mentor_reviews_rating_range"
        ),
        {"sqlite_autoincrement": True},
    )

    mentor: Mapped[str] = mapped_column(Text, nullable=False)

    feedback: Mapped[str] = mapped_column(Text, nullable=False)

    rating: Mapped[float] = mapped_column(
        Numeric(3, 2, asdecimal=False),
        nullable=False,
        default=0,
        server_default=text("0"),
    )
