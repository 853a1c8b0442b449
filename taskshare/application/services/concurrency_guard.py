"""Optimistic concurrency guard for task updates.

Two checks bracket every update. check_expected_version rejects a stale
expected version before anything is written. resolve_conditional_write
interprets the result of the store's atomic compare-and-increment, which is
what actually serialises concurrent writers that passed the first check.
"""

from __future__ import annotations

from taskshare.application.dtos.task import TaskResult
from taskshare.domain.exceptions import ResourceNotFoundException, VersionConflictException
from taskshare.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def check_expected_version(task: TaskResult, expected_version: int | None) -> None:
    """Raise VersionConflictException if expected_version is given and differs from task.version.

    No expected version means last-writer-wins; the check is skipped.
    """
    if expected_version is None:
        return
    if expected_version != task.version:
        logger.info(
            "Version conflict on task %s: expected %s, current %s",
            task.id,
            expected_version,
            task.version,
        )
        raise VersionConflictException(
            task.id, expected_version=expected_version, current_version=task.version
        )


def resolve_conditional_write(
    task_id: str,
    updated: TaskResult | None,
    expected_version: int | None,
) -> TaskResult:
    """Map the outcome of an atomic conditional update to a result or an error.

    None from the store means no row matched: with an expected version the
    caller lost the race (VersionConflictException); without one the task was
    deleted in between (ResourceNotFoundException).
    """
    if updated is not None:
        return updated
    if expected_version is not None:
        logger.info(
            "Version conflict on task %s: lost atomic update at expected version %s",
            task_id,
            expected_version,
        )
        raise VersionConflictException(task_id, expected_version=expected_version)
    raise ResourceNotFoundException("task", task_id)
