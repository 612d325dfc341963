"""
Project API endpoints.

Routes:
- GET /projects - List all projects
- POST /projects - Create new project
- GET /projects/{id} - Get single project
- PUT /projects/{id} - Update any supplied subset of fields
- PATCH /projects/{id}/students - Update student count only
- DELETE /projects/{id} - Delete project

Identifiers arrive as raw path strings so a malformed id is reported as
a 400 by the service layer rather than a framework 422.

Dependencies: admin_panel.application.services, admin_panel.models
System role: Project management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from admin_panel.application.services import ProjectService
from admin_panel.api.deps.dependencies import get_project_service
from admin_panel.models.common import DeleteResponse
from admin_panel.models.project import (
    CreateProjectRequest,
    ProjectResponse,
    UpdateProjectRequest,
    UpdateStudentsRequest,
)

from ..router_utils import (
    handle_resource_errors,
    map_deleted_to_response,
    map_project_to_response,
    map_projects_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
@handle_resource_errors
async def list_projects(
    project_service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """
    List all projects ordered by id.

    Raises:
        HTTPException(500): Retrieval failed
    """
    projects = await project_service.list_all()
    logger.debug("Projects retrieved", extra={"count": len(projects)})
    return map_projects_to_response(projects)


@router.post("", response_model=ProjectResponse, status_code=201)
@handle_resource_errors
async def create_project(
    request: CreateProjectRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Create new project.

    Args:
        request: CreateProjectRequest with title, mentor, optional students
        project_service: Injected ProjectService

    Returns:
        ProjectResponse: Created project

    Raises:
        HTTPException(400): Missing title or mentor
        HTTPException(500): Creation failed
    """
    project = await project_service.create(request.model_dump())
    return map_project_to_response(project)


@router.get("/{project_id}", response_model=ProjectResponse)
@handle_resource_errors
async def get_project(
    project_id: str,
    project_service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Get single project by ID.

    Raises:
        HTTPException(400): Invalid id
        HTTPException(404): Project not found
    """
    project = await project_service.get(project_id)
    return map_project_to_response(project)


@router.put("/{project_id}", response_model=ProjectResponse)
@handle_resource_errors
async def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Update project by ID.

    Only the fields present in the body are written; at least one of
    title, mentor, students is required.

    Args:
        project_id: Project id from the path
        request: UpdateProjectRequest with any subset of fields
        project_service: Injected ProjectService

    Returns:
        ProjectResponse: Updated project

    Raises:
        HTTPException(400): Invalid id or no fields provided
        HTTPException(404): Project not found
        HTTPException(500): Update failed
    """
    logger.info(
        "Updating project",
        extra={"project_id": project_id, "fields": sorted(request.model_fields_set)},
    )

    project = await project_service.replace(
        project_id,
        request.model_dump(),
        request.model_fields_set,
    )
    return map_project_to_response(project)


@router.patch("/{project_id}/students", response_model=ProjectResponse)
@handle_resource_errors
async def update_project_students(
    project_id: str,
    request: UpdateStudentsRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Set the student count of a project.

    Raises:
        HTTPException(400): Invalid id, missing or non-numeric students
        HTTPException(404): Project not found
        HTTPException(500): Update failed
    """
    project = await project_service.update_students(project_id, request.students)
    return map_project_to_response(project)


@router.delete("/{project_id}", response_model=DeleteResponse)
@handle_resource_errors
async def delete_project(
    project_id: str,
    project_service: ProjectService = Depends(get_project_service),
) -> DeleteResponse:
    """
    Delete project by ID.

    Returns:
        DeleteResponse: {ok, message, id}

    Raises:
        HTTPException(400): Invalid id
        HTTPException(404): Project not found
        HTTPException(500): Deletion failed
    """
    deleted_id = await project_service.delete(project_id)
    return map_deleted_to_response(project_service.descriptor.label, deleted_id)
