"""User repository: existence checks and public profiles for share grantees."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskshare.application.dtos.user import UserProfile
from taskshare.infrastructure.persistence.models.user import User
from taskshare.infrastructure.persistence.repositories.base import BaseRepository


def _to_profile(u: User) -> UserProfile:
    """Map User ORM to UserProfile (hashed_password is never copied)."""
    return UserProfile(id=u.id, name=u.name, email=u.email)


class UserRepository(BaseRepository[User]):
    """Read-only user lookups. Implements IUserDirectory."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_profile(self, user_id: str) -> UserProfile | None:
        row = await self.get_by_id(user_id)
        return _to_profile(row) if row else None

    async def get_profiles(self, user_ids: set[str]) -> dict[str, UserProfile]:
        if not user_ids:
            return {}
        result = await self.db.execute(
            select(User.id, User.name, User.email).where(User.id.in_(user_ids))
        )
        return {
            row.id: UserProfile(id=row.id, name=row.name, email=row.email)
            for row in result.all()
        }

    async def list_profiles(self) -> list[UserProfile]:
        """Return all users' public profiles, ordered by name then id."""
        result = await self.db.execute(
            select(User.id, User.name, User.email).order_by(User.name, User.id)
        )
        return [
            UserProfile(id=row.id, name=row.name, email=row.email)
            for row in result.all()
        ]
