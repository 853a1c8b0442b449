"""Domain enumerations for tasks, shares and access levels."""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]


class SharePermission(str, Enum):
    """Permission level stored on a share.

    ADMIN is accepted and stored but grants the same rights as EDIT.
    """

    VIEW = "view"
    EDIT = "edit"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid permission values as strings."""
        return [p.value for p in cls]


class AccessLevel(str, Enum):
    """Effective role of a caller on a task, flat and ordered (NONE lowest, OWNER highest)."""

    NONE = "none"
    VIEW = "view"
    EDIT = "edit"
    ADMIN = "admin"
    OWNER = "owner"

    @property
    def rank(self) -> int:
        return _ACCESS_RANK[self]

    @classmethod
    def from_permission(cls, permission: SharePermission | str) -> "AccessLevel":
        """Map a stored share permission to its access level."""
        return cls(SharePermission(permission).value)


_ACCESS_RANK: dict[AccessLevel, int] = {
    AccessLevel.NONE: 0,
    AccessLevel.VIEW: 1,
    AccessLevel.EDIT: 2,
    AccessLevel.ADMIN: 3,
    AccessLevel.OWNER: 4,
}


class TaskAction(str, Enum):
    """Operations on an existing task that are subject to access checks."""

    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    SHARE = "share"
    UNSHARE = "unshare"
    LIST_SHARES = "list_shares"
