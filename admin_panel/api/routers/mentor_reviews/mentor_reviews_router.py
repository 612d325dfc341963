"""
Mentor review API endpoints.

Routes:
- GET /mentor-reviews - List all reviews
- POST /mentor-reviews - Create new review
- GET /mentor-reviews/{id} - Get single review
- PUT /mentor-reviews/{id} - Update any supplied subset of fields
- DELETE /mentor-reviews/{id} - Delete review

Dependencies: admin_panel.application.services, admin_panel.models
System role: Mentor review HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from admin_panel.application.services import MentorReviewService
from admin_panel.api.deps.dependencies import get_mentor_review_service
from admin_panel.models.common import DeleteResponse
from admin_panel.models.mentor_review import (
    CreateMentorReviewRequest,
    MentorReviewResponse,
    UpdateMentorReviewRequest,
)

from ..router_utils import (
    handle_resource_errors,
    map_deleted_to_response,
    map_review_to_response,
    map_reviews_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mentor-reviews", tags=["mentor-reviews"])


@router.get("", response_model=list[MentorReviewResponse])
@handle_resource_errors
async def list_reviews(
    review_service: MentorReviewService = Depends(get_mentor_review_service),
) -> list[MentorReviewResponse]:
    """List all mentor reviews ordered by id."""
    reviews = await review_service.list_all()
    return map_reviews_to_response(reviews)


@router.post("", response_model=MentorReviewResponse, status_code=201)
@handle_resource_errors
async def create_review(
    request: CreateMentorReviewRequest,
    review_service: MentorReviewService = Depends(get_mentor_review_service),
) -> MentorReviewResponse:
    """
    Create new mentor review.

    Args:
        request: CreateMentorReviewRequest with mentor, feedback, rating
        review_service: Injected MentorReviewService

    Returns:
        MentorReviewResponse: Created review

    Raises:
        HTTPException(400): Missing field or rating outside [0, 5]
        HTTPException(500): Creation failed
    """
    review = await review_service.create(request.model_dump())
    return map_review_to_response(review)


@router.get("/{review_id}", response_model=MentorReviewResponse)
@handle_resource_errors
async def get_review(
    review_id: str,
    review_service: MentorReviewService = Depends(get_mentor_review_service),
) -> MentorReviewResponse:
    """Get single mentor review by ID."""
    review = await review_service.get(review_id)
    return map_review_to_response(review)


@router.put("/{review_id}", response_model=MentorReviewResponse)
@handle_resource_errors
async def update_review(
    review_id: str,
    request: UpdateMentorReviewRequest,
    review_service: MentorReviewService = Depends(get_mentor_review_service),
) -> MentorReviewResponse:
    """
    Update mentor review by ID.

    Raises:
        HTTPException(400): Invalid id, no fields, or invalid rating
        HTTPException(404): Review not found
        HTTPException(500): Update failed
    """
    review = await review_service.replace(
        review_id,
        request.model_dump(),
        request.model_fields_set,
    )
    return map_review_to_response(review)


@router.delete("/{review_id}", response_model=DeleteResponse)
@handle_resource_errors
async def delete_review(
    review_id: str,
    review_service: MentorReviewService = Depends(get_mentor_review_service),
) -> DeleteResponse:
    """
    Delete mentor review by ID.

    Raises:
        HTTPException(400): Invalid id
        HTTPException(404): Review not found
        HTTPException(500): Deletion failed
    """
    deleted_id = await review_service.delete(review_id)
    logger.info("Mentor review removed", extra={"review_id": deleted_id})
    return map_deleted_to_response(review_service.descriptor.label, deleted_id)
