"""
Exception hierarchy for the content backend.

Provides layered exception structure for content lifecycle errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ContentBackendException(Exception):
    """Base exception for all content backend errors."""

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


class ValidationError(ContentBackendException):
    """Raised when a required field is missing or malformed."""

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


class DuplicateCategoryError(ValidationError):
    """Raised when a category name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Category "{name}" already exists', field="name")


class CategoryInUseError(ValidationError):
    """Raised when deleting a category that courses still reference."""

    def __init__(self, name: str, course_count: int) -> None:
        super().__init__(
            f'Category "{name}" is used by {course_count} course(s)',
            field="category",
            details={"course_count": course_count},
        )


class MissingImageError(ContentBackendException):
    """Raised when a create operation has no image upload."""

    def __init__(self, entity: str) -> None:
        """
        Initialize missing image error.

        Args:
            entity: Entity kind being created (course, blog)
        """
        super().__init__(f"{entity.capitalize()} image is required", {"entity": entity})


class InvalidCategoryError(ContentBackendException):
    """Raised when a course references a category that does not exist."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f'Category "{category}" does not exist', {"category": category})


class NotFoundError(ContentBackendException):
    """Raised when an operation targets a record that does not exist."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        """
        Initialize not found error.

        Args:
            entity: Entity kind (course, blog, category)
            entity_id: Identifier that did not resolve
        """
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity.capitalize()} not found: {entity_id}",
            {"entity": entity, "entity_id": str(entity_id)},
        )


class AssetStoreError(ContentBackendException):
    """Raised when the remote image store fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize asset store error.

        Args:
            message: Error message
            operation: Operation that failed (upload, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, details)


class AuthenticationError(ContentBackendException):
    """Raised when admin credentials are rejected."""

    pass
