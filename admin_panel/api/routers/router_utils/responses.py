"""
Resource response mapping utilities.

Transforms service dictionaries into Pydantic response models.
Centralizes response construction logic.

Dependencies: admin_panel.models
System role: Resource response transformation
"""

from typing import Any

from admin_panel.models.common import DeleteResponse
from admin_panel.models.mentor_review import MentorReviewResponse
from admin_panel.models.project import ProjectResponse


def map_project_to_response(project_data: dict[str, Any]) -> ProjectResponse:
    """
    Transform project data dictionary into ProjectResponse.

    Args:
        project_data: Dictionary containing project fields
            Expected keys: id, title, mentor, students, created_at, updated_at

    Returns:
        ProjectResponse: Pydantic model for API response
    """
    return ProjectResponse(**project_data)


def map_projects_to_response(projects_data: list[dict[str, Any]]) -> list[ProjectResponse]:
    """Transform list of project dictionaries into list of ProjectResponse."""
    return [map_project_to_response(project) for project in projects_data]


def map_review_to_response(review_data: dict[str, Any]) -> MentorReviewResponse:
    """
    Transform mentor review data dictionary into MentorReviewResponse.

    Args:
        review_data: Dictionary containing review fields
            Expected keys: id, mentor, feedback, rating, created_at, updated_at

    Returns:
        MentorReviewResponse: Pydantic model for API response
    """
    return MentorReviewResponse(**review_data)


def map_reviews_to_response(reviews_data: list[dict[str, Any]]) -> list[MentorReviewResponse]:
    """Transform list of review dictionaries into list of MentorReviewResponse."""
    return [map_review_to_response(review) for review in reviews_data]


def map_deleted_to_response(label: str, deleted_id: int) -> DeleteResponse:
    """Build the acknowledgement returned after a deletion."""
    return DeleteResponse(message=f"{label} deleted", id=deleted_id)
