"""User use cases: read-only directory lookups."""

from taskshare.application.use_cases.users.user_operations import UserService

__all__ = ["UserService"]
