"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from taskshare.application.dtos.share import ShareResult
    from taskshare.application.dtos.task import TaskCreate, TaskResult
    from taskshare.application.dtos.user import UserProfile
    from taskshare.domain.enums import SharePermission


class ITaskRepository(Protocol):
    """Protocol for the task store."""

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID."""

    async def get_many(self, task_ids: set[str]) -> list[TaskResult]:
        """Return tasks for the given ids (missing ids are skipped)."""

    async def create(self, owner_id: str, data: TaskCreate) -> TaskResult:
        """Insert a task owned by owner_id at the initial version."""

    async def update_fields(
        self,
        task_id: str,
        changes: dict[str, Any],
        expected_version: int | None = None,
    ) -> TaskResult | None:
        """Apply changes and increment version in one atomic statement.

        When expected_version is given the write only happens if the stored
        version still equals it. Returns None when no row matched.
        """

    async def delete(self, task_id: str) -> bool:
        """Delete task; return True if a row was removed."""

    async def list_by_owner(self, owner_id: str) -> list[TaskResult]:
        """Return tasks owned by owner_id."""


class ITaskShareRepository(Protocol):
    """Protocol for the share registry."""

    async def get_by_id(self, share_id: str) -> ShareResult | None:
        """Return share by ID."""

    async def get_for_user(self, task_id: str, shared_with_id: str) -> ShareResult | None:
        """Return the share for (task, grantee), if any."""

    async def upsert(
        self, task_id: str, shared_with_id: str, permission: SharePermission
    ) -> ShareResult:
        """Insert a share or update the permission of the existing (task, grantee) share atomically."""

    async def delete(self, share_id: str) -> bool:
        """Delete share; return True if removed."""

    async def delete_by_task(self, task_id: str) -> int:
        """Delete all shares of a task; return number removed."""

    async def list_by_task(self, task_id: str) -> list[ShareResult]:
        """Return shares of a task."""

    async def list_by_user(self, shared_with_id: str) -> list[ShareResult]:
        """Return shares granted to a user."""


class IUserDirectory(Protocol):
    """Protocol for user existence and public profile lookups."""

    async def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the user's public profile, or None if the user does not exist."""

    async def get_profiles(self, user_ids: set[str]) -> dict[str, UserProfile]:
        """Return profiles keyed by id for the users that exist."""

    async def list_profiles(self) -> list[UserProfile]:
        """Return every user's public profile, ordered by name."""
