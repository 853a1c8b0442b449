"""Application services: access evaluation and optimistic concurrency guard."""

from taskshare.application.services.access_evaluator import (
    POLICY,
    can_perform,
    effective_permission,
    require_action,
)
from taskshare.application.services.concurrency_guard import (
    check_expected_version,
    resolve_conditional_write,
)

__all__ = [
    "POLICY",
    "can_perform",
    "check_expected_version",
    "effective_permission",
    "require_action",
    "resolve_conditional_write",
]
