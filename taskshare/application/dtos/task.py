"""DTOs for task use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from taskshare.application.dtos.share import ShareResult
from taskshare.domain.enums import TaskStatus

# Fields a caller may change through update; id, owner_id, version and timestamps are system-managed.
UPDATABLE_TASK_FIELDS = frozenset({"title", "description", "status", "due_date"})


@dataclass(frozen=True)
class TaskCreate:
    """Write-model for a new task. owner_id comes from the caller identity, never the payload."""

    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None


@dataclass(frozen=True)
class TaskResult:
    """Task read-model."""

    id: str
    title: str
    description: str | None
    status: TaskStatus
    due_date: datetime | None
    owner_id: str
    version: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TaskWithShares:
    """Task plus its shares, as loaded for permission checks."""

    task: TaskResult
    shares: list[ShareResult] = field(default_factory=list)
