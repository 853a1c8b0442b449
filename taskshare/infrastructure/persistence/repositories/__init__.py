"""Persistence repositories. Re-exports for dependency injection."""

from taskshare.infrastructure.persistence.repositories.base import BaseRepository
from taskshare.infrastructure.persistence.repositories.task_repo import TaskRepository
from taskshare.infrastructure.persistence.repositories.task_share_repo import (
    TaskShareRepository,
)
from taskshare.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "TaskRepository",
    "TaskShareRepository",
    "UserRepository",
]
