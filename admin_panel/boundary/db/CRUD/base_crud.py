"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations for the
integer-keyed resource tables. Model-specific CRUD classes inherit and
extend it.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from admin_panel.boundary.db.base import Base, utc_now
from admin_panel.boundary.db.statements import build_partial_update

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Every write is a single statement with RETURNING, so the caller gets
    the stored row back without a second round trip.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, session: AsyncSession, **kwargs: Any) -> ModelT:
        """
        Insert a new row with both timestamps set to now.

        Args:
            session: Async database session
            **kwargs: Column values

        Returns:
            Created model instance with assigned ID and timestamps
        """
        now = utc_now()
        stmt = (
            insert(self.model)
            .values(**kwargs, created_at=now, updated_at=now)
            .returning(self.model)
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def get_by_id(self, session: AsyncSession, id: int) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self, session: AsyncSession) -> Sequence[ModelT]:
        """
        Retrieve all records ordered by identifier ascending.

        Args:
            session: Async database session

        Returns:
            Sequence of model instances (empty when the table is empty)
        """
        stmt = select(self.model).order_by(self.model.id.asc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_fields(
        self,
        session: AsyncSession,
        id: int,
        assignments: Sequence[tuple[str, Any]],
    ) -> ModelT | None:
        """
        Update only the supplied columns of a record, refreshing updated_at.

        Args:
            session: Async database session
            id: Integer primary key
            assignments: (column, value) pairs in statement order

        Returns:
            Updated model instance if found, None otherwise

        Raises:
            ValidationError: If `assignments` is empty
        """
        stmt = build_partial_update(self.model, id, assignments)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: int,
        **kwargs: Any,
    ) -> ModelT | None:
        """
        Update a record by primary key, refreshing updated_at.

        Args:
            session: Async database session
            id: Integer primary key
            **kwargs: Fields to update with new values

        Returns:
            Updated model instance if found, None otherwise
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**kwargs, updated_at=utc_now())
            .returning(self.model)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: int) -> int | None:
        """
        Delete a record by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            The deleted identifier, or None if no row matched
        """
        stmt = delete(self.model).where(self.model.id == id).returning(self.model.id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, session: AsyncSession, id: int) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
