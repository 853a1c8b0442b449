"""DTOs for task shares."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from taskshare.domain.enums import SharePermission


@dataclass(frozen=True)
class ShareResult:
    """Share read-model: one grant of a permission on a task to a non-owner."""

    id: str
    task_id: str
    shared_with_id: str
    permission: SharePermission
    shared_at: datetime


@dataclass(frozen=True)
class SharedUserResult:
    """Share joined with the grantee's public profile (list-shares view)."""

    id: str
    shared_with_id: str
    permission: SharePermission
    shared_at: datetime
    name: str | None
    email: str | None
