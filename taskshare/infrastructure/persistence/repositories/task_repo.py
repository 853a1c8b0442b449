"""Task repository: the task store. Returns application DTOs.

update_fields is the store's atomic compare-and-increment: one UPDATE whose
WHERE clause carries the expected version, so of two writers holding the same
version exactly one matches a row.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskshare.application.dtos.task import TaskCreate, TaskResult
from taskshare.domain.enums import TaskStatus
from taskshare.infrastructure.persistence.models.task import Task
from taskshare.infrastructure.persistence.repositories.base import BaseRepository
from taskshare.shared.telemetry.logging import get_logger
from taskshare.shared.utils.datetime import ensure_utc, utc_now

logger = get_logger(__name__)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        title=t.title,
        description=t.description,
        status=TaskStatus(t.status),
        due_date=ensure_utc(t.due_date),
        owner_id=t.owner_id,
        version=t.version,
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
    )


def _to_column_values(changes: dict[str, Any]) -> dict[str, Any]:
    """Map DTO field values to column values (enum -> str, datetimes -> UTC)."""
    values = dict(changes)
    if "status" in values:
        values["status"] = TaskStatus(values["status"]).value
    if "due_date" in values:
        values["due_date"] = ensure_utc(values["due_date"])
    return values


class TaskRepository(BaseRepository[Task]):
    """Task store. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        row = await self._get_orm_by_id(task_id, refresh=True)
        return _to_result(row) if row else None

    async def get_many(self, task_ids: set[str]) -> list[TaskResult]:
        """Return tasks for the given ids, oldest first."""
        if not task_ids:
            return []
        result = await self.db.execute(
            select(Task)
            .where(Task.id.in_(task_ids))
            .order_by(Task.created_at, Task.id)
            .execution_options(populate_existing=True)
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def create(self, owner_id: str, data: TaskCreate) -> TaskResult:  # type: ignore[override]
        """Insert a task at version 1 and return the result DTO."""
        task = Task(
            title=data.title,
            description=data.description,
            status=TaskStatus(data.status).value,
            due_date=ensure_utc(data.due_date),
            owner_id=owner_id,
            version=1,
        )
        created = await super().create(task)
        return _to_result(created)

    async def update_fields(
        self,
        task_id: str,
        changes: dict[str, Any],
        expected_version: int | None = None,
    ) -> TaskResult | None:
        """Apply changes, bump version by one and refresh updated_at in a single UPDATE.

        With expected_version the statement only matches while the stored
        version equals it. Returns None if no row matched (stale version or
        task gone).
        changes must already be limited to updatable fields; TaskService
        validates them.
        """
        values = _to_column_values(changes)
        values["version"] = Task.version + 1
        values["updated_at"] = utc_now()
        stmt = update(Task).where(Task.id == task_id)
        if expected_version is not None:
            stmt = stmt.where(Task.version == expected_version)
        stmt = stmt.values(**values).execution_options(synchronize_session=False)
        result = await self.db.execute(stmt)
        if result.rowcount != 1:
            logger.debug(
                "Conditional update on task %s matched %d rows (expected_version=%s)",
                task_id,
                result.rowcount,
                expected_version,
            )
            return None
        row = await self._get_orm_by_id(task_id, refresh=True)
        return _to_result(row) if row else None

    async def delete(self, task_id: str) -> bool:  # type: ignore[override]
        """Delete task by id; return True if a row was removed."""
        result = await self.db.execute(
            delete(Task)
            .where(Task.id == task_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def list_by_owner(self, owner_id: str) -> list[TaskResult]:
        """Return tasks owned by owner_id, oldest first."""
        result = await self.db.execute(
            select(Task)
            .where(Task.owner_id == owner_id)
            .order_by(Task.created_at, Task.id)
            .execution_options(populate_existing=True)
        )
        return [_to_result(t) for t in result.scalars().all()]
