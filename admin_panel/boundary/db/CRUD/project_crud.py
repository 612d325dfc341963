"""
Project CRUD operations.

Dependencies: sqlalchemy, admin_panel.boundary.db.models
System role: Project persistence operations
"""

from sqlalchemy.ext.asyncio import AsyncSession

from admin_panel.boundary.db.models.project_model import ProjectModel
from admin_panel.boundary.db.CRUD.base_crud import BaseCRUD


class ProjectCRUD(BaseCRUD[ProjectModel]):
    """CRUD operations for ProjectModel."""

    def __init__(self) -> None:
        """Initialize ProjectCRUD with ProjectModel."""
        super().__init__(ProjectModel)

    async def set_students(
        self,
        session: AsyncSession,
        id: int,
        students: int,
    ) -> ProjectModel | None:
        """
        Overwrite the student count of a project.

        Args:
            session: Async database session
            id: Project ID
            students: New non-negative student count

        Returns:
            Updated ProjectModel, None if no project has this ID
        """
        return await self.update_by_id(session, id, students=students)


project_crud = ProjectCRUD()
