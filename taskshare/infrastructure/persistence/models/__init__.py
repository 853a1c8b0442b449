"""ORM models. Importing this package registers every table on Base.metadata."""

from taskshare.infrastructure.persistence.models.task import Task
from taskshare.infrastructure.persistence.models.task_share import TaskShare
from taskshare.infrastructure.persistence.models.user import User

__all__ = ["Task", "TaskShare", "User"]
