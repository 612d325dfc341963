"""
Partial-update statement builder.

Builds an UPDATE that assigns exactly the supplied columns plus
``updated_at``. Every value is a bound parameter and the identifier
predicate is bound last.

Dependencies: sqlalchemy
System role: Dynamic UPDATE construction for sparse field sets
"""

from typing import Any, Sequence

from sqlalchemy import Update, update

from admin_panel.boundary.db.base import Base, utc_now
from admin_panel.core.exceptions import ValidationError


def build_partial_update(
    model: type[Base],
    record_id: int,
    assignments: Sequence[tuple[str, Any]],
) -> Update:
    """
    Build a parameterized UPDATE ... RETURNING for a sparse field set.

    Args:
        model: ORM model whose table is updated
        record_id: Identifier of the row to update
        assignments: (column, value) pairs in the order they should be set

    Returns:
        Update: Statement returning the updated row as a model instance

    Raises:
        ValidationError: If `assignments` is empty or names an unknown or
            managed column
    """
    if not assignments:
        raise ValidationError("No fields provided to update")

    columns = model.__table__.c
    pairs = []
    for name, value in assignments:
        if name not in columns or name in ("id", "created_at", "updated_at"):
            raise ValidationError(f"{name} cannot be updated", field=name)
        pairs.append((columns[name], value))
    pairs.append((columns["updated_at"], utc_now()))

    return (
        update(model)
        .ordered_values(*pairs)
        .where(model.id == record_id)
        .returning(model)
    )
