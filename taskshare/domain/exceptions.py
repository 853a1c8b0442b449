"""Domain exceptions for the task sharing service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskShareException(Exception):
    """Base exception for all application errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. task_id, action).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskShareException):
    """Raised when input validation fails (e.g. empty title, unknown field)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TaskShareException):
    """Raised when the caller identity cannot be established (missing or bad token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(TaskShareException):
    """Raised when a task, share, or referenced user does not exist."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource ('task', 'share', 'user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class AccessDeniedException(TaskShareException):
    """Raised when the caller's role on a task is too low for the attempted action."""

    def __init__(self, action: str, task_id: str) -> None:
        """Initialize with the attempted action and the task it targeted.

        Args:
            action: Action that was attempted (e.g. 'update', 'share').
            task_id: Task the action targeted.
        """
        super().__init__(
            f"Permission denied: {action} on task {task_id}",
            "PERMISSION_DENIED",
            {"action": action, "task_id": task_id},
        )

    @property
    def action(self) -> str:
        return self.details["action"]

    @property
    def task_id(self) -> str:
        return self.details["task_id"]


class VersionConflictException(TaskShareException):
    """Raised when the expected version does not match, or a concurrent write won the race."""

    def __init__(
        self,
        task_id: str,
        expected_version: int | None,
        current_version: int | None = None,
    ) -> None:
        """Initialize with task id and the versions involved.

        Args:
            task_id: Task whose update was rejected.
            expected_version: Version the caller based its change on.
            current_version: Stored version when known; None when the atomic write lost.
        """
        details: dict[str, Any] = {
            "task_id": task_id,
            "expected_version": expected_version,
        }
        if current_version is not None:
            details["current_version"] = current_version
        super().__init__(
            "Task has been modified by another user. Refresh and try again.",
            "VERSION_CONFLICT",
            details,
        )


class InvalidShareException(TaskShareException):
    """Raised when a share request is structurally invalid (e.g. sharing with the owner)."""

    def __init__(self, task_id: str, reason: str) -> None:
        super().__init__(
            reason,
            "INVALID_SHARE",
            {"task_id": task_id},
        )



class UnsupportedDatabaseException(TaskShareException):
    """Raised when DATABASE_URL names a backend without INSERT ... ON CONFLICT support."""

    def __init__(self, dialect: str) -> None:
        super().__init__(
            message=f"Database backend '{dialect}' is not supported; use PostgreSQL or SQLite.",
            error_code="SERVICE_UNAVAILABLE",
            details={"dialect": dialect},
        )
