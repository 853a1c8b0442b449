"""TaskService tests against in-memory repositories."""

import asyncio

import pytest

from taskshare.application.dtos.task import TaskCreate
from taskshare.application.dtos.user import UserProfile
from taskshare.application.use_cases.tasks import TaskService
from taskshare.domain.enums import SharePermission, TaskStatus
from taskshare.domain.exceptions import (
    AccessDeniedException,
    InvalidShareException,
    ResourceNotFoundException,
    ValidationException,
    VersionConflictException,
)
from tests.fakes import FakeShareRepository, FakeTaskRepository, FakeUserDirectory

ALICE, BOB, CAROL, DAVE = "alice", "bob", "carol", "dave"


@pytest.fixture
def repos():
    users = FakeUserDirectory(
        UserProfile(id=ALICE, name="Alice", email="alice@example.com"),
        UserProfile(id=BOB, name="Bob", email="bob@example.com"),
        UserProfile(id=CAROL, name="Carol", email="carol@example.com"),
        UserProfile(id=DAVE, name="Dave", email="dave@example.com"),
    )
    return FakeTaskRepository(), FakeShareRepository(), users


@pytest.fixture
def svc(repos) -> TaskService:
    task_repo, share_repo, users = repos
    return TaskService(task_repo=task_repo, share_repo=share_repo, user_directory=users)


@pytest.fixture
async def task(svc):
    """Task owned by alice, shared with bob (edit) and carol (view)."""
    created = await svc.create_task(ALICE, TaskCreate(title="Write report"))
    await svc.share_task(created.id, ALICE, BOB, SharePermission.EDIT)
    await svc.share_task(created.id, ALICE, CAROL, SharePermission.VIEW)
    return created


class TestCreateAndRead:
    async def test_create_sets_owner_and_initial_version(self, svc) -> None:
        created = await svc.create_task(ALICE, TaskCreate(title="Plan sprint"))
        assert created.owner_id == ALICE
        assert created.version == 1
        assert created.status == TaskStatus.TODO

    async def test_create_rejects_blank_title(self, svc) -> None:
        with pytest.raises(ValidationException):
            await svc.create_task(ALICE, TaskCreate(title="   "))

    async def test_get_missing_task_is_not_found(self, svc) -> None:
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await svc.get_task("nope", ALICE)
        assert exc_info.value.details["resource_type"] == "task"

    async def test_get_attaches_shares(self, svc, task) -> None:
        loaded = await svc.get_task(task.id, CAROL)
        assert loaded.task.id == task.id
        assert {s.shared_with_id for s in loaded.shares} == {BOB, CAROL}

    async def test_stranger_is_denied_everything(self, svc, task) -> None:
        with pytest.raises(AccessDeniedException):
            await svc.get_task(task.id, DAVE)
        with pytest.raises(AccessDeniedException):
            await svc.update_task(task.id, DAVE, {"title": "x"})
        with pytest.raises(AccessDeniedException):
            await svc.delete_task(task.id, DAVE)

    async def test_reads_do_not_change_version(self, svc, task) -> None:
        await svc.get_task(task.id, ALICE)
        await svc.get_task(task.id, BOB)
        assert (await svc.get_task(task.id, ALICE)).task.version == 1

    async def test_list_returns_owned_and_shared_without_duplicates(self, svc, task) -> None:
        own = await svc.create_task(BOB, TaskCreate(title="Bob's own"))
        listed = await svc.list_tasks(BOB)
        assert [t.id for t in listed] == [own.id, task.id]
        assert [t.id for t in await svc.list_tasks(DAVE)] == []


class TestUpdate:
    async def test_edit_share_updates_and_version_increments_once(self, svc, task) -> None:
        updated = await svc.update_task(task.id, BOB, {"title": "New title"}, expected_version=1)
        assert updated.title == "New title"
        assert updated.version == 2
        assert updated.updated_at >= task.updated_at

    async def test_omitted_fields_keep_values(self, svc, repos) -> None:
        created = await svc.create_task(
            ALICE, TaskCreate(title="Keep", description="details")
        )
        updated = await svc.update_task(created.id, ALICE, {"status": "in_progress"})
        assert updated.status == TaskStatus.IN_PROGRESS
        assert updated.title == "Keep"
        assert updated.description == "details"
        assert updated.owner_id == ALICE

    async def test_view_share_cannot_update(self, svc, task, repos) -> None:
        task_repo, _, _ = repos
        with pytest.raises(AccessDeniedException) as exc_info:
            await svc.update_task(task.id, CAROL, {"title": "x"})
        assert exc_info.value.action == "update"
        assert task_repo.update_calls == []

    async def test_admin_share_can_update(self, svc, task) -> None:
        await svc.share_task(task.id, ALICE, DAVE, SharePermission.ADMIN)
        updated = await svc.update_task(task.id, DAVE, {"status": "completed"})
        assert updated.status == TaskStatus.COMPLETED

    async def test_stale_version_is_rejected_before_write(self, svc, task, repos) -> None:
        task_repo, _, _ = repos
        await svc.update_task(task.id, ALICE, {"title": "v2"}, expected_version=1)
        with pytest.raises(VersionConflictException):
            await svc.update_task(task.id, BOB, {"title": "v3"}, expected_version=1)
        assert len(task_repo.update_calls) == 1
        assert (await svc.get_task(task.id, ALICE)).task.version == 2

    async def test_without_expected_version_last_writer_wins(self, svc, task) -> None:
        await svc.update_task(task.id, ALICE, {"title": "first"})
        updated = await svc.update_task(task.id, BOB, {"title": "second"})
        assert updated.title == "second"
        assert updated.version == 3

    async def test_unknown_field_is_rejected_before_the_store(self, svc, task, repos) -> None:
        task_repo, _, _ = repos
        for field in ("owner_id", "version", "created_at"):
            with pytest.raises(ValidationException) as exc_info:
                await svc.update_task(task.id, ALICE, {field: BOB})
            assert exc_info.value.details == {"field": field}
        assert task_repo.update_calls == []

    async def test_empty_title_is_rejected(self, svc, task) -> None:
        with pytest.raises(ValidationException):
            await svc.update_task(task.id, ALICE, {"title": ""})

    async def test_concurrent_updates_same_version_one_wins(self, svc, task, repos) -> None:
        """Both pass the pre-check on version 1; the atomic write lets only one through."""
        task_repo, _, _ = repos
        results = await asyncio.gather(
            svc.update_task(task.id, BOB, {"title": "Bob's title"}, expected_version=1),
            svc.update_task(task.id, ALICE, {"status": "in_progress"}, expected_version=1),
            return_exceptions=True,
        )
        successes = [r for r in results if not isinstance(r, Exception)]
        conflicts = [r for r in results if isinstance(r, VersionConflictException)]
        assert len(successes) == 1
        assert len(conflicts) == 1
        assert len(task_repo.update_calls) == 2
        final = (await svc.get_task(task.id, ALICE)).task
        assert final.version == 2
        assert final.title == "Bob's title"
        assert final.status == TaskStatus.TODO

    async def test_update_of_deleted_task_without_version_is_not_found(
        self, svc, task, repos
    ) -> None:
        task_repo, _, _ = repos

        async def vanish(task_id, changes, expected_version=None):
            return None

        task_repo.update_fields = vanish
        with pytest.raises(ResourceNotFoundException):
            await svc.update_task(task.id, ALICE, {"title": "x"})


class TestDelete:
    async def test_owner_delete_cascades_shares(self, svc, task, repos) -> None:
        _, share_repo, _ = repos
        await svc.delete_task(task.id, ALICE)
        assert await share_repo.list_by_task(task.id) == []
        with pytest.raises(ResourceNotFoundException):
            await svc.get_task(task.id, BOB)

    async def test_edit_share_cannot_delete(self, svc, task) -> None:
        with pytest.raises(AccessDeniedException):
            await svc.delete_task(task.id, BOB)


class TestSharing:
    async def test_reshare_updates_permission_in_place(self, svc, task, repos) -> None:
        _, share_repo, _ = repos
        first = (await share_repo.get_for_user(task.id, CAROL))
        again = await svc.share_task(task.id, ALICE, CAROL, SharePermission.EDIT)
        shares = await share_repo.list_by_task(task.id)
        assert [s.id for s in shares if s.shared_with_id == CAROL] == [first.id]
        assert again.id == first.id
        assert again.permission == SharePermission.EDIT

    async def test_concurrent_shares_to_same_user_leave_one_row(
        self, svc, task, repos
    ) -> None:
        _, share_repo, _ = repos
        first, second = await asyncio.gather(
            svc.share_task(task.id, ALICE, DAVE, SharePermission.VIEW),
            svc.share_task(task.id, ALICE, DAVE, SharePermission.EDIT),
        )
        assert first.id == second.id
        dave_shares = [
            s for s in await share_repo.list_by_task(task.id) if s.shared_with_id == DAVE
        ]
        assert len(dave_shares) == 1
        assert dave_shares[0].permission == SharePermission.EDIT

    async def test_share_with_owner_is_invalid(self, svc, task) -> None:
        with pytest.raises(InvalidShareException):
            await svc.share_task(task.id, ALICE, ALICE, SharePermission.VIEW)

    async def test_share_with_unknown_user_is_not_found(self, svc, task) -> None:
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await svc.share_task(task.id, ALICE, "ghost", SharePermission.VIEW)
        assert exc_info.value.details["resource_type"] == "user"

    async def test_unknown_permission_is_rejected(self, svc, task) -> None:
        with pytest.raises(ValidationException):
            await svc.share_task(task.id, ALICE, DAVE, "superuser")

    async def test_default_permission_is_view(self, svc, task) -> None:
        share = await svc.share_task(task.id, ALICE, DAVE)
        assert share.permission == SharePermission.VIEW

    async def test_edit_share_cannot_manage_shares(self, svc, task, repos) -> None:
        _, share_repo, _ = repos
        carol_share = await share_repo.get_for_user(task.id, CAROL)
        with pytest.raises(AccessDeniedException):
            await svc.share_task(task.id, BOB, DAVE, SharePermission.VIEW)
        with pytest.raises(AccessDeniedException):
            await svc.remove_share(task.id, carol_share.id, BOB)
        with pytest.raises(AccessDeniedException):
            await svc.list_shares(task.id, BOB)

    async def test_remove_share_revokes_access(self, svc, task, repos) -> None:
        _, share_repo, _ = repos
        carol_share = await share_repo.get_for_user(task.id, CAROL)
        await svc.remove_share(task.id, carol_share.id, ALICE)
        with pytest.raises(AccessDeniedException):
            await svc.get_task(task.id, CAROL)

    async def test_remove_missing_share_is_not_found(self, svc, task) -> None:
        with pytest.raises(ResourceNotFoundException):
            await svc.remove_share(task.id, "nope", ALICE)

    async def test_remove_share_of_another_task_is_not_found(self, svc, task, repos) -> None:
        _, share_repo, _ = repos
        other = await svc.create_task(ALICE, TaskCreate(title="Other"))
        other_share = await svc.share_task(other.id, ALICE, DAVE, SharePermission.VIEW)
        with pytest.raises(ResourceNotFoundException):
            await svc.remove_share(task.id, other_share.id, ALICE)
        assert await share_repo.get_by_id(other_share.id) is not None

    async def test_list_shares_joins_profiles(self, svc, task) -> None:
        shares = await svc.list_shares(task.id, ALICE)
        by_user = {s.shared_with_id: s for s in shares}
        assert by_user[BOB].name == "Bob"
        assert by_user[BOB].email == "bob@example.com"
        assert by_user[BOB].permission == SharePermission.EDIT
        assert by_user[CAROL].permission == SharePermission.VIEW


async def test_shared_edit_scenario(svc) -> None:
    """Owner creates, shares edit; editor wins version 1, owner's stale write conflicts."""
    created = await svc.create_task(ALICE, TaskCreate(title="T"))
    assert created.version == 1
    await svc.share_task(created.id, ALICE, BOB, SharePermission.EDIT)

    updated = await svc.update_task(created.id, BOB, {"title": "T by Bob"}, expected_version=1)
    assert updated.version == 2

    with pytest.raises(VersionConflictException):
        await svc.update_task(
            created.id, ALICE, {"status": "in_progress"}, expected_version=1
        )
    assert (await svc.get_task(created.id, ALICE)).task.version == 2
