"""Service orchestrators."""

from .resource_service import ResourceService
from .project_service import ProjectService
from .mentor_review_service import MentorReviewService

__all__ = [
    "ResourceService",
    "ProjectService",
    "MentorReviewService",
]
