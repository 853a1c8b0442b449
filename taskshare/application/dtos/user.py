"""DTOs for user lookups (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    """Public user profile. Never carries credentials."""

    id: str
    name: str
    email: str
