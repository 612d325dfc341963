"""
Exception hierarchy for the admin panel backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class AdminPanelException(Exception):
    """Base exception for all admin panel application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(AdminPanelException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class NotFoundError(AdminPanelException):
    """Raised when an identifier does not resolve to a stored row."""

    def __init__(
        self,
        resource: str,
        record_id: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource: Human-readable resource label ("Project", "Review")
            record_id: Identifier that was looked up
            details: Additional context
        """
        details = details or {}
        details["id"] = record_id
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} not found", details)


class StoreError(AdminPanelException):
    """Raised when the relational store is unreachable or rejects a statement."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message safe to return to API callers
            operation: Operation that failed (list, create, update, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, details)
