"""
Generic resource service.

Implements the list/get/create/replace/delete contract once; it is
instantiated per resource with that resource's descriptor and CRUD.

Dependencies: sqlalchemy, admin_panel.boundary.db.CRUD, admin_panel.core
System role: Resource use case orchestration
"""

import logging
from typing import Any, Collection, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from admin_panel.boundary.db.base import Base
from admin_panel.boundary.db.CRUD.base_crud import BaseCRUD
from admin_panel.core.exceptions import NotFoundError, StoreError
from admin_panel.core.resources import ResourceDescriptor
from admin_panel.core.validation import parse_identifier

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class ResourceService(Generic[ModelT]):
    """
    CRUD contract shared by every managed resource.

    Validation runs before the store is touched. Store exceptions, and
    driver connection failures that surface as OSError, are logged with
    full detail and re-raised as StoreError carrying a message that is
    safe to show API callers.
    """

    def __init__(
        self,
        db: AsyncSession,
        crud: BaseCRUD[ModelT],
        descriptor: ResourceDescriptor,
    ) -> None:
        """
        Initialize resource service.

        Args:
            db: Async SQLAlchemy session for this request
            crud: CRUD singleton for the resource's table
            descriptor: Field set and validation rules
        """
        self.db = db
        self.crud = crud
        self.descriptor = descriptor

    def to_dict(self, row: ModelT) -> dict[str, Any]:
        """Map an ORM row to the API's field layout."""
        data: dict[str, Any] = {"id": row.id}
        for name in self.descriptor.field_names:
            data[name] = getattr(row, name)
        data["created_at"] = row.created_at
        data["updated_at"] = row.updated_at
        return data

    async def _store_failure(
        self,
        operation: str,
        message: str,
        error: SQLAlchemyError | OSError,
        **context: Any,
    ) -> StoreError:
        """Roll back, log the underlying error and build the caller-facing StoreError."""
        await self.db.rollback()
        logger.error(
            f"Failed to {operation} {self.descriptor.name}",
            exc_info=error,
            extra={"resource": self.descriptor.name, "operation": operation, **context},
        )
        return StoreError(message, operation=operation)

    async def list_all(self) -> list[dict[str, Any]]:
        """
        Get every row ordered by identifier.

        Returns:
            list[dict]: Resource dicts, empty when none are stored

        Raises:
            StoreError: If the store query fails
        """
        try:
            rows = await self.crud.get_all(self.db)
        except (SQLAlchemyError, OSError) as e:
            raise await self._store_failure("list", "Server error", e) from e
        return [self.to_dict(row) for row in rows]

    async def get(self, record_id: str | int) -> dict[str, Any]:
        """
        Get one row by identifier.

        Raises:
            ValidationError: If the identifier is not an integer
            NotFoundError: If no row has this identifier
            StoreError: If the store query fails
        """
        row_id = parse_identifier(record_id)
        try:
            row = await self.crud.get_by_id(self.db, row_id)
        except (SQLAlchemyError, OSError) as e:
            raise await self._store_failure(
                "fetch", f"Failed to fetch {self.descriptor.label.lower()}", e, id=row_id
            ) from e
        if row is None:
            raise NotFoundError(self.descriptor.label, row_id)
        return self.to_dict(row)

    async def create(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Validate and insert a new row.

        Args:
            payload: Raw request values

        Returns:
            dict: Created row including its assigned identifier

        Raises:
            ValidationError: If a required field is missing or invalid
            StoreError: If the insert fails
        """
        values = self.descriptor.validate_create(payload)
        try:
            row = await self.crud.create(self.db, **values)
            await self.db.commit()
        except (SQLAlchemyError, OSError) as e:
            raise await self._store_failure(
                "create", f"Failed to create {self.descriptor.label.lower()}", e
            ) from e

        logger.info(
            f"{self.descriptor.label} created",
            extra={"resource": self.descriptor.name, "id": row.id},
        )
        return self.to_dict(row)

    async def replace(
        self,
        record_id: str | int,
        payload: dict[str, Any],
        present: Collection[str],
    ) -> dict[str, Any]:
        """
        Apply the supplied subset of fields to an existing row.

        Fields absent from `present` are left unchanged even though the
        route is the "full update" one; clients rely on sending partial
        field lists.

        Args:
            record_id: Raw identifier from the path
            payload: Raw request values
            present: Names of the fields the client actually sent

        Returns:
            dict: Updated row

        Raises:
            ValidationError: If the id is invalid, no fields were supplied,
                or a supplied value is invalid
            NotFoundError: If no row has this identifier
            StoreError: If the store rejects the statement
        """
        row_id = parse_identifier(record_id)
        assignments = self.descriptor.collect_updates(payload, present)
        message = f"Failed to update {self.descriptor.label.lower()}"

        try:
            if not await self.crud.exists(self.db, row_id):
                raise NotFoundError(self.descriptor.label, row_id)
            row = await self.crud.update_fields(self.db, row_id, assignments)
            if row is None:
                # Deleted between the existence check and the update
                raise NotFoundError(self.descriptor.label, row_id)
            await self.db.commit()
        except (SQLAlchemyError, OSError) as e:
            raise await self._store_failure("update", message, e, id=row_id) from e

        logger.info(
            f"{self.descriptor.label} updated",
            extra={
                "resource": self.descriptor.name,
                "id": row_id,
                "updates": [name for name, _ in assignments],
            },
        )
        return self.to_dict(row)

    async def delete(self, record_id: str | int) -> int:
        """
        Delete one row by identifier.

        Returns:
            int: The deleted identifier

        Raises:
            ValidationError: If the identifier is not an integer
            NotFoundError: If no row has this identifier
            StoreError: If the delete fails
        """
        row_id = parse_identifier(record_id)
        try:
            deleted_id = await self.crud.delete_by_id(self.db, row_id)
            if deleted_id is None:
                raise NotFoundError(self.descriptor.label, row_id)
            await self.db.commit()
        except (SQLAlchemyError, OSError) as e:
            raise await self._store_failure(
                "delete", f"Failed to delete {self.descriptor.label.lower()}", e, id=row_id
            ) from e

        logger.info(
            f"{self.descriptor.label} deleted",
            extra={"resource": self.descriptor.name, "id": deleted_id},
        )
        return deleted_id
