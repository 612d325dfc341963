"""API request/response schemas."""

from admin_panel.models.common import DeleteResponse, ErrorResponse, HealthResponse
from admin_panel.models.mentor_review import (
    CreateMentorReviewRequest,
    MentorReviewResponse,
    UpdateMentorReviewRequest,
)
from admin_panel.models.project import (
    CreateProjectRequest,
    ProjectResponse,
    UpdateProjectRequest,
    UpdateStudentsRequest,
)

__all__ = [
    "CreateMentorReviewRequest",
    "CreateProjectRequest",
    "DeleteResponse",
    "ErrorResponse",
    "HealthResponse",
    "MentorReviewResponse",
    "ProjectResponse",
    "UpdateMentorReviewRequest",
    "UpdateProjectRequest",
    "UpdateStudentsRequest",
]
