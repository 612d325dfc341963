"""
Common response models.

Deletion, health and error schemas shared by all resources.

Dependencies: pydantic
System role: Common API response structures
"""

from datetime import datetime

from pydantic import BaseModel, Field


class DeleteResponse(BaseModel):
    """Response schema for a successful deletion."""

    ok: bool = True
    message: str
    id: int


class HealthResponse(BaseModel):
    """Health check response model."""

    success: bool
    message: str
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    message: str = Field(description="Error message")
    field: str | None = Field(default=None, description="Request field that failed validation")
    error: str | None = Field(default=None, description="Underlying error (development only)")
