"""User directory operations: list users and look up public profiles.

Lets clients discover the ids that share grants need. Profiles never carry
credentials.
"""

from __future__ import annotations

from taskshare.application.dtos.user import UserProfile
from taskshare.application.interfaces.repositories import IUserDirectory
from taskshare.domain.exceptions import ResourceNotFoundException


class UserService:
    """Read-only user lookups for authenticated callers."""

    def __init__(self, user_directory: IUserDirectory) -> None:
        self.user_directory = user_directory

    async def list_users(self) -> list[UserProfile]:
        return await self.user_directory.list_profiles()

    async def get_user(self, user_id: str) -> UserProfile:
        """Return the user's profile.

        Raises:
            ResourceNotFoundException: No user with this id.
        """
        profile = await self.user_directory.get_profile(user_id)
        if profile is None:
            raise ResourceNotFoundException("user", user_id)
        return profile
