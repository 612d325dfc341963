"""
Project service orchestrator.

Dependencies: admin_panel.boundary.db.CRUD, admin_panel.core
System role: Project use case orchestration
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from admin_panel.application.services.resource_service import ResourceService
from admin_panel.boundary.db.CRUD.project_crud import project_crud
from admin_panel.boundary.db.models.project_model import ProjectModel
from admin_panel.core.exceptions import NotFoundError
from admin_panel.core.resources import PROJECT_RESOURCE
from admin_panel.core.validation import parse_identifier, require_count

logger = logging.getLogger(__name__)


class ProjectService(ResourceService[ProjectModel]):
    """Project service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, project_crud, PROJECT_RESOURCE)

    async def update_students(self, record_id: str | int, students: Any) -> dict[str, Any]:
        """
        Set only the student count of a project.

        Unlike create/replace, an unparseable count is rejected rather
        than defaulted to zero.

        Args:
            record_id: Raw identifier from the path
            students: Raw student count from the request body

        Returns:
            dict: Updated project

        Raises:
            ValidationError: If the id or count is invalid
            NotFoundError: If no project has this identifier
            StoreError: If the update fails
        """
        row_id = parse_identifier(record_id)
        count = require_count(students, "students")
        try:
            row = await self.crud.set_students(self.db, row_id, count)
            if row is None:
                raise NotFoundError(self.descriptor.label, row_id)
            await self.db.commit()
        except (SQLAlchemyError, OSError) as e:
            raise await self._store_failure(
                "update", "Failed to update students", e, id=row_id
            ) from e

        logger.info("Project students updated", extra={"id": row_id, "students": count})
        return self.to_dict(row)
