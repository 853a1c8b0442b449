"""Task share repository: the share registry.

upsert relies on the (task_id, shared_with_id) unique constraint and a single
INSERT ... ON CONFLICT DO UPDATE, so concurrent grants to the same user never
produce two rows.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from taskshare.application.dtos.share import ShareResult
from taskshare.domain.enums import SharePermission
from taskshare.domain.exceptions import ResourceNotFoundException
from taskshare.infrastructure.persistence.models.task_share import TaskShare
from taskshare.infrastructure.persistence.repositories.base import BaseRepository
from taskshare.shared.utils.datetime import ensure_utc, utc_now
from taskshare.shared.utils.generators import generate_cuid

# Keyed by dialect name; database.ensure_supported_backend admits only these.
_UPSERT_INSERTS: dict[str, Any] = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def _to_result(s: TaskShare) -> ShareResult:
    """Map TaskShare ORM to ShareResult DTO."""
    return ShareResult(
        id=s.id,
        task_id=s.task_id,
        shared_with_id=s.shared_with_id,
        permission=SharePermission(s.permission),
        shared_at=ensure_utc(s.shared_at),
    )


class TaskShareRepository(BaseRepository[TaskShare]):
    """Share registry. Implements ITaskShareRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, TaskShare)

    async def get_by_id(self, share_id: str) -> ShareResult | None:
        row = await self._get_orm_by_id(share_id, refresh=True)
        return _to_result(row) if row else None

    async def get_for_user(
        self, task_id: str, shared_with_id: str
    ) -> ShareResult | None:
        """Return the share for (task, grantee), if any."""
        result = await self.db.execute(
            select(TaskShare)
            .where(
                TaskShare.task_id == task_id,
                TaskShare.shared_with_id == shared_with_id,
            )
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def upsert(
        self, task_id: str, shared_with_id: str, permission: SharePermission
    ) -> ShareResult:
        """Insert a share, or update the permission of the existing one for this grantee.

        id and shared_at of an existing share are preserved.
        """
        insert_fn = _UPSERT_INSERTS[self.db.get_bind().dialect.name]
        stmt = insert_fn(TaskShare).values(
            id=generate_cuid(),
            task_id=task_id,
            shared_with_id=shared_with_id,
            permission=SharePermission(permission).value,
            shared_at=utc_now(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["task_id", "shared_with_id"],
            set_={"permission": stmt.excluded.permission},
        )
        await self.db.execute(stmt)
        share = await self.get_for_user(task_id, shared_with_id)
        if share is None:
            raise ResourceNotFoundException("share", f"{task_id}/{shared_with_id}")
        return share

    async def delete(self, share_id: str) -> bool:  # type: ignore[override]
        """Delete share by id; return True if removed."""
        row = await self._get_orm_by_id(share_id)
        if row is None:
            return False
        await super().delete(row)
        return True

    async def delete_by_task(self, task_id: str) -> int:
        """Delete every share of a task; return the number removed."""
        result = await self.db.execute(
            delete(TaskShare)
            .where(TaskShare.task_id == task_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def list_by_task(self, task_id: str) -> list[ShareResult]:
        """Return shares of a task, oldest grant first."""
        result = await self.db.execute(
            select(TaskShare)
            .where(TaskShare.task_id == task_id)
            .order_by(TaskShare.shared_at, TaskShare.id)
            .execution_options(populate_existing=True)
        )
        return [_to_result(s) for s in result.scalars().all()]

    async def list_by_user(self, shared_with_id: str) -> list[ShareResult]:
        """Return shares granted to a user, oldest grant first."""
        result = await self.db.execute(
            select(TaskShare)
            .where(TaskShare.shared_with_id == shared_with_id)
            .order_by(TaskShare.shared_at, TaskShare.id)
            .execution_options(populate_existing=True)
        )
        return [_to_result(s) for s in result.scalars().all()]
