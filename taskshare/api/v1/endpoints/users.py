"""User API: read-only profile lookups so callers can find share grantees."""

from fastapi import APIRouter

from taskshare.api.v1.dependencies import CurrentUserId, ReadUserService
from taskshare.schemas.user import UserResponse

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(_: CurrentUserId, user_svc: ReadUserService):
    """List all users (id, name, email)."""
    users = await user_svc.list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.get("/profile", response_model=UserResponse)
async def get_own_profile(caller_id: CurrentUserId, user_svc: ReadUserService):
    """Return the caller's own profile."""
    return UserResponse.model_validate(await user_svc.get_user(caller_id))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, _: CurrentUserId, user_svc: ReadUserService):
    """Return a user's public profile."""
    return UserResponse.model_validate(await user_svc.get_user(user_id))
