"""
Project domain models and schemas.

Request/response schemas for project operations. Request fields are
untyped on purpose: coercion rules live in admin_panel.core.validation
and a field's presence (``model_fields_set``) decides whether it is
updated.

Dependencies: pydantic
System role: Project API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateProjectRequest(BaseModel):
    """Request schema for creating a new project."""

    model_config = ConfigDict(extra="ignore")

    title: Any = Field(None, description="Project title")
    mentor: Any = Field(None, description="Mentor name")
    students: Any = Field(None, description="Student count, defaults to 0")


class UpdateProjectRequest(BaseModel):
    """Request schema for updating any subset of a project's fields."""

    model_config = ConfigDict(extra="ignore")

    title: Any = Field(None, description="Project title")
    mentor: Any = Field(None, description="Mentor name")
    students: Any = Field(None, description="Student count")


class UpdateStudentsRequest(BaseModel):
    """Request schema for setting a project's student count."""

    model_config = ConfigDict(extra="ignore")

    students: Any = Field(None, description="Student count")


class ProjectResponse(BaseModel):
    """Response schema for project operations."""

    id: int
    title: str
    mentor: str
    students: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
