"""
Core business logic module.

Contains the exception hierarchy, input validation and resource descriptors.
"""

from admin_panel.core.exceptions import (
    AdminPanelException,
    NotFoundError,
    StoreError,
    ValidationError,
)
from admin_panel.core.resources import (
    MENTOR_REVIEW_RESOURCE,
    PROJECT_RESOURCE,
    FieldSpec,
    ResourceDescriptor,
)

__all__ = [
    # Exceptions
    "AdminPanelException",
    "NotFoundError",
    "StoreError",
    "ValidationError",
    # Resources
    "FieldSpec",
    "ResourceDescriptor",
    "PROJECT_RESOURCE",
    "MENTOR_REVIEW_RESOURCE",
]
