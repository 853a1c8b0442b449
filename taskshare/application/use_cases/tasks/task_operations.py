"""Task operations: create, read, update, delete, share, unshare, list shares.

TaskService is the only component with business logic. Every check (existence,
access, expected version) runs before any write, and each write is a single
atomic store operation, so a rejected call leaves nothing behind.
"""

from __future__ import annotations

from typing import Any

from taskshare.application.dtos.share import ShareResult, SharedUserResult
from taskshare.application.dtos.task import (
    UPDATABLE_TASK_FIELDS,
    TaskCreate,
    TaskResult,
    TaskWithShares,
)
from taskshare.application.interfaces.repositories import (
    ITaskRepository,
    ITaskShareRepository,
    IUserDirectory,
)
from taskshare.application.services.access_evaluator import require_action
from taskshare.application.services.concurrency_guard import (
    check_expected_version,
    resolve_conditional_write,
)
from taskshare.domain.enums import SharePermission, TaskAction, TaskStatus
from taskshare.domain.exceptions import (
    InvalidShareException,
    ResourceNotFoundException,
    ValidationException,
)
from taskshare.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _validate_title(title: Any) -> None:
    if not isinstance(title, str) or not title.strip():
        raise ValidationException("Title must be a non-empty string", field="title")


def _normalize_changes(changes: dict[str, Any]) -> dict[str, Any]:
    """Keep only updatable fields; reject unknown keys and an empty title."""
    unknown = set(changes) - UPDATABLE_TASK_FIELDS
    if unknown:
        raise ValidationException(
            f"Fields cannot be updated: {', '.join(sorted(unknown))}",
            field=sorted(unknown)[0],
        )
    normalized = dict(changes)
    if "title" in normalized:
        _validate_title(normalized["title"])
    if "status" in normalized:
        try:
            normalized["status"] = TaskStatus(normalized["status"])
        except ValueError as e:
            raise ValidationException(
                f"Status must be one of: {', '.join(TaskStatus.values())}",
                field="status",
            ) from e
    return normalized


class TaskService:
    """Owned tasks, graded shares and optimistic concurrency for one caller at a time."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        share_repo: ITaskShareRepository,
        user_directory: IUserDirectory,
    ) -> None:
        self.task_repo = task_repo
        self.share_repo = share_repo
        self.user_directory = user_directory

    async def create_task(self, caller_id: str, data: TaskCreate) -> TaskResult:
        """Create a task owned by the caller. No access check: anyone may own tasks."""
        _validate_title(data.title)
        task = await self.task_repo.create(owner_id=caller_id, data=data)
        logger.debug("Task %s created by %s", task.id, caller_id)
        return task

    async def list_tasks(self, caller_id: str) -> list[TaskResult]:
        """Return tasks owned by the caller followed by tasks shared with them, without duplicates."""
        owned = await self.task_repo.list_by_owner(caller_id)
        shares = await self.share_repo.list_by_user(caller_id)
        seen = {t.id for t in owned}
        shared_ids = {s.task_id for s in shares} - seen
        shared = await self.task_repo.get_many(shared_ids) if shared_ids else []
        shared.sort(key=lambda t: (t.created_at, t.id))
        return [*owned, *shared]

    async def get_task(self, task_id: str, caller_id: str) -> TaskWithShares:
        """Load task with its shares and require read access.

        Raises:
            ResourceNotFoundException: Task does not exist.
            AccessDeniedException: Caller neither owns it nor holds a share.
        """
        loaded = await self._load(task_id)
        require_action(loaded.task, loaded.shares, caller_id, TaskAction.READ)
        return loaded

    async def update_task(
        self,
        task_id: str,
        caller_id: str,
        changes: dict[str, Any],
        expected_version: int | None = None,
    ) -> TaskResult:
        """Apply the supplied fields; omitted fields keep their values.

        Requires owner or an edit-level share. When expected_version is given
        it must equal the stored version, both before the write and atomically
        at the write.

        Raises:
            ResourceNotFoundException: Task does not exist.
            AccessDeniedException: Caller may not update.
            VersionConflictException: Stale expected_version or lost race.
            ValidationException: Unknown field or empty title.
        """
        loaded = await self.get_task(task_id, caller_id)
        require_action(loaded.task, loaded.shares, caller_id, TaskAction.UPDATE)
        check_expected_version(loaded.task, expected_version)
        normalized = _normalize_changes(changes)
        updated = await self.task_repo.update_fields(
            task_id, normalized, expected_version=expected_version
        )
        return resolve_conditional_write(task_id, updated, expected_version)

    async def delete_task(self, task_id: str, caller_id: str) -> None:
        """Delete an owned task and every share on it."""
        loaded = await self.get_task(task_id, caller_id)
        require_action(loaded.task, loaded.shares, caller_id, TaskAction.DELETE)
        removed_shares = await self.share_repo.delete_by_task(task_id)
        if not await self.task_repo.delete(task_id):
            raise ResourceNotFoundException("task", task_id)
        logger.info(
            "Task %s deleted by owner %s (%d shares removed)",
            task_id,
            caller_id,
            removed_shares,
        )

    async def share_task(
        self,
        task_id: str,
        caller_id: str,
        shared_with_id: str,
        permission: SharePermission | str = SharePermission.VIEW,
    ) -> ShareResult:
        """Grant permission on an owned task to another user.

        Re-sharing with the same user updates the existing share's permission.

        Raises:
            ResourceNotFoundException: Task or grantee does not exist.
            AccessDeniedException: Caller is not the owner.
            InvalidShareException: Grantee is the owner.
            ValidationException: Unknown permission value.
        """
        loaded = await self.get_task(task_id, caller_id)
        require_action(loaded.task, loaded.shares, caller_id, TaskAction.SHARE)
        if shared_with_id == loaded.task.owner_id:
            raise InvalidShareException(task_id, "Cannot share task with its owner")
        try:
            level = SharePermission(permission)
        except ValueError as e:
            raise ValidationException(
                f"Permission must be one of: {', '.join(SharePermission.values())}",
                field="permission",
            ) from e
        if await self.user_directory.get_profile(shared_with_id) is None:
            raise ResourceNotFoundException("user", shared_with_id)
        share = await self.share_repo.upsert(task_id, shared_with_id, level)
        logger.info(
            "Task %s shared with %s as %s", task_id, shared_with_id, level.value
        )
        return share

    async def remove_share(self, task_id: str, share_id: str, caller_id: str) -> None:
        """Revoke a share on an owned task.

        The share must belong to task_id; a share of another task is reported
        as not found.
        """
        loaded = await self.get_task(task_id, caller_id)
        require_action(loaded.task, loaded.shares, caller_id, TaskAction.UNSHARE)
        share = await self.share_repo.get_by_id(share_id)
        if share is None or share.task_id != task_id:
            raise ResourceNotFoundException("share", share_id)
        if not await self.share_repo.delete(share_id):
            raise ResourceNotFoundException("share", share_id)
        logger.info("Share %s on task %s removed by owner", share_id, task_id)

    async def list_shares(self, task_id: str, caller_id: str) -> list[SharedUserResult]:
        """Return shares of an owned task with each grantee's name and email."""
        loaded = await self.get_task(task_id, caller_id)
        require_action(loaded.task, loaded.shares, caller_id, TaskAction.LIST_SHARES)
        profiles = await self.user_directory.get_profiles(
            {s.shared_with_id for s in loaded.shares}
        )
        result: list[SharedUserResult] = []
        for share in loaded.shares:
            profile = profiles.get(share.shared_with_id)
            result.append(
                SharedUserResult(
                    id=share.id,
                    shared_with_id=share.shared_with_id,
                    permission=share.permission,
                    shared_at=share.shared_at,
                    name=profile.name if profile else None,
                    email=profile.email if profile else None,
                )
            )
        return result

    async def _load(self, task_id: str) -> TaskWithShares:
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        shares = await self.share_repo.list_by_task(task_id)
        return TaskWithShares(task=task, shares=shares)
