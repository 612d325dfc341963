"""
Mentor review domain models and schemas.

Request/response schemas for mentor review operations.

Dependencies: pydantic
System role: Mentor review API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateMentorReviewRequest(BaseModel):
    """Request schema for creating a new mentor review."""

    model_config = ConfigDict(extra="ignore")

    mentor: Any = Field(None, description="Reviewed mentor's name")
    feedback: Any = Field(None, description="Review text")
    rating: Any = Field(None, description="Score between 0 and 5")


class UpdateMentorReviewRequest(BaseModel):
    """Request schema for updating any subset of a review's fields."""

    model_config = ConfigDict(extra="ignore")

    mentor: Any = Field(None, description="Reviewed mentor's name")
    feedback: Any = Field(None, description="Review text")
    rating: Any = Field(None, description="Score between 0 and 5")


class MentorReviewResponse(BaseModel):
    """Response schema for mentor review operations."""

    id: int
    mentor: str
    feedback: str
    rating: float
    created_at: datetime | None = None
    updated_at: datetime | None = None
