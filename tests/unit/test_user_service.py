"""UserService tests against an in-memory user directory."""

import pytest

from taskshare.application.dtos.user import UserProfile
from taskshare.application.use_cases.users import UserService
from taskshare.domain.exceptions import ResourceNotFoundException
from tests.fakes import FakeUserDirectory


@pytest.fixture
def svc() -> UserService:
    return UserService(
        FakeUserDirectory(
            UserProfile(id="u2", name="Carol", email="carol@example.com"),
            UserProfile(id="u1", name="Bob", email="bob@example.com"),
        )
    )


async def test_list_users_is_ordered_by_name(svc) -> None:
    users = await svc.list_users()
    assert [u.name for u in users] == ["Bob", "Carol"]


async def test_get_user_returns_profile(svc) -> None:
    profile = await svc.get_user("u2")
    assert profile == UserProfile(id="u2", name="Carol", email="carol@example.com")


async def test_get_unknown_user_is_not_found(svc) -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await svc.get_user("ghost")
    assert exc_info.value.details == {"resource_type": "user", "resource_id": "ghost"}
