"""Access evaluator: pure mapping from (ownership, shares, caller) to an access level.

The whole policy table lives in POLICY. Nothing here performs I/O.
"""

from __future__ import annotations

from collections.abc import Iterable

from taskshare.application.dtos.share import ShareResult
from taskshare.application.dtos.task import TaskResult
from taskshare.domain.enums import AccessLevel, TaskAction
from taskshare.domain.exceptions import AccessDeniedException

# Minimum access level per action. ADMIN ranks above EDIT but below OWNER,
# so it unlocks exactly what EDIT unlocks.
POLICY: dict[TaskAction, AccessLevel] = {
    TaskAction.READ: AccessLevel.VIEW,
    TaskAction.UPDATE: AccessLevel.EDIT,
    TaskAction.DELETE: AccessLevel.OWNER,
    TaskAction.SHARE: AccessLevel.OWNER,
    TaskAction.UNSHARE: AccessLevel.OWNER,
    TaskAction.LIST_SHARES: AccessLevel.OWNER,
}


def effective_permission(
    task: TaskResult, shares: Iterable[ShareResult], caller_id: str
) -> AccessLevel:
    """Return the caller's effective access level on task.

    OWNER when the caller owns the task; otherwise the level of the share
    granted to the caller; otherwise NONE. Shares of other tasks are ignored.
    """
    if caller_id == task.owner_id:
        return AccessLevel.OWNER
    for share in shares:
        if share.task_id == task.id and share.shared_with_id == caller_id:
            return AccessLevel.from_permission(share.permission)
    return AccessLevel.NONE


def can_perform(level: AccessLevel, action: TaskAction) -> bool:
    """Return True if level meets the minimum POLICY requires for action."""
    return level.rank >= POLICY[action].rank


def require_action(
    task: TaskResult,
    shares: Iterable[ShareResult],
    caller_id: str,
    action: TaskAction,
) -> AccessLevel:
    """Return the caller's access level, or raise AccessDeniedException if it is too low for action."""
    level = effective_permission(task, shares, caller_id)
    if not can_perform(level, action):
        raise AccessDeniedException(action=action.value, task_id=task.id)
    return level
