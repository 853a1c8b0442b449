"""Application DTOs (frozen dataclasses; no ORM dependency)."""

from taskshare.application.dtos.share import ShareResult, SharedUserResult
from taskshare.application.dtos.task import (
    UPDATABLE_TASK_FIELDS,
    TaskCreate,
    TaskResult,
    TaskWithShares,
)
from taskshare.application.dtos.user import UserProfile

__all__ = [
    "UPDATABLE_TASK_FIELDS",
    "ShareResult",
    "SharedUserResult",
    "TaskCreate",
    "TaskResult",
    "TaskWithShares",
    "UserProfile",
]
