"""
Per-resource field descriptors.

A descriptor lists a resource's writable fields in their canonical order
together with the coercer that validates each one. The generic service
layer is instantiated once per descriptor.

Dependencies: admin_panel.core.validation
System role: Field set and validation rules for projects and mentor reviews
"""

from dataclasses import dataclass
from typing import Any, Callable, Collection

from admin_panel.core.exceptions import ValidationError
from admin_panel.core.validation import coerce_count, coerce_rating, require_text

Coercer = Callable[[dict[str, Any], str], Any]


@dataclass(frozen=True)
class FieldSpec:
    """A writable column and the rule that turns request input into its value."""

    name: str
    coerce: Coercer

    def clean(self, payload: dict[str, Any]) -> Any:
        return self.coerce(payload, self.name)


@dataclass(frozen=True)
class ResourceDescriptor:
    """
    Field set and labels for one managed resource.

    Attributes:
        name: Machine name used in logs ("project")
        label: Human label used in API messages ("Project")
        fields: Writable fields in statement order
    """

    name: str
    label: str
    fields: tuple[FieldSpec, ...]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def validate_create(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Validate and coerce every field for an insert.

        Raises:
            ValidationError: On the first field that fails its rule
        """
        return {spec.name: spec.clean(payload) for spec in self.fields}

    def collect_updates(
        self,
        payload: dict[str, Any],
        present: Collection[str],
    ) -> list[tuple[str, Any]]:
        """
        Coerce only the fields the caller supplied, in descriptor order.

        Args:
            payload: Raw request values
            present: Names of fields actually sent in the request

        Returns:
            list[tuple[str, Any]]: (column, value) pairs for the update builder

        Raises:
            ValidationError: If nothing was supplied or a supplied value is invalid
        """
        assignments = [
            (spec.name, spec.clean(payload))
            for spec in self.fields
            if spec.name in present
        ]
        if not assignments:
            raise ValidationError("No fields provided to update")
        return assignments


def _count(payload: dict[str, Any], field: str) -> int:
    return coerce_count(payload.get(field), field, default=0)


def _rating(payload: dict[str, Any], field: str) -> float:
    return coerce_rating(payload.get(field), field)


PROJECT_RESOURCE = ResourceDescriptor(
    name="project",
    label="Project",
    fields=(
        FieldSpec("title", require_text),
        FieldSpec("mentor", require_text),
        FieldSpec("students", _count),
    ),
)

MENTOR_REVIEW_RESOURCE = ResourceDescriptor(
    name="mentor_review",
    label="Review",
    fields=(
        FieldSpec("mentor", require_text),
        FieldSpec("feedback", require_text),
        FieldSpec("rating", _rating),
    ),
)
