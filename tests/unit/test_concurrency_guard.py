"""Tests for the optimistic concurrency guard."""

from datetime import datetime, timezone

import pytest

from taskshare.application.dtos.task import TaskResult
from taskshare.application.services.concurrency_guard import (
    check_expected_version,
    resolve_conditional_write,
)
from taskshare.domain.enums import TaskStatus
from taskshare.domain.exceptions import ResourceNotFoundException, VersionConflictException

_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _task(version: int = 3) -> TaskResult:
    return TaskResult(
        id="t1",
        title="Write report",
        description=None,
        status=TaskStatus.TODO,
        due_date=None,
        owner_id="owner",
        version=version,
        created_at=_NOW,
        updated_at=_NOW,
    )


def test_no_expected_version_skips_check() -> None:
    check_expected_version(_task(version=3), None)


def test_matching_version_passes() -> None:
    check_expected_version(_task(version=3), 3)


def test_stale_version_raises_with_both_versions() -> None:
    with pytest.raises(VersionConflictException) as exc_info:
        check_expected_version(_task(version=3), 2)
    assert exc_info.value.error_code == "VERSION_CONFLICT"
    assert exc_info.value.details == {
        "task_id": "t1",
        "expected_version": 2,
        "current_version": 3,
    }


def test_resolve_returns_updated_task() -> None:
    task = _task(version=4)
    assert resolve_conditional_write("t1", task, 3) is task


def test_resolve_lost_race_is_conflict() -> None:
    with pytest.raises(VersionConflictException) as exc_info:
        resolve_conditional_write("t1", None, 3)
    assert exc_info.value.details["expected_version"] == 3
    assert "current_version" not in exc_info.value.details


def test_resolve_unconditional_miss_is_not_found() -> None:
    with pytest.raises(ResourceNotFoundException):
        resolve_conditional_write("t1", None, None)
