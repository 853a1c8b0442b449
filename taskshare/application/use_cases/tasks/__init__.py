"""Task use cases: CRUD, sharing and share listing."""

from taskshare.application.use_cases.tasks.task_operations import TaskService

__all__ = ["TaskService"]
