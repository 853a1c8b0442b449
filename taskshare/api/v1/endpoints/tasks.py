"""Task API: thin routes delegating to TaskService."""

from fastapi import APIRouter, Response

from taskshare.api.v1.dependencies import (
    CurrentUserId,
    ReadTaskService,
    WriteTaskService,
)
from taskshare.application.dtos.task import TaskCreate
from taskshare.schemas.task import (
    ShareCreateRequest,
    SharedUserResponse,
    ShareResponse,
    TaskCreateRequest,
    TaskDetailResponse,
    TaskResponse,
    TaskUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(
    body: TaskCreateRequest,
    caller_id: CurrentUserId,
    task_svc: WriteTaskService,
):
    """Create a task owned by the caller."""
    created = await task_svc.create_task(
        caller_id,
        TaskCreate(
            title=body.title,
            description=body.description,
            status=body.status,
            due_date=body.due_date,
        ),
    )
    return TaskResponse.model_validate(created)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(caller_id: CurrentUserId, task_svc: ReadTaskService):
    """List tasks the caller owns or that are shared with them."""
    tasks = await task_svc.list_tasks(caller_id)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskDetailResponse)
async def get_task(task_id: str, caller_id: CurrentUserId, task_svc: ReadTaskService):
    """Get a task with its shares (owner or any share holder)."""
    loaded = await task_svc.get_task(task_id, caller_id)
    return TaskDetailResponse(
        **TaskResponse.model_validate(loaded.task).model_dump(),
        shares=[ShareResponse.model_validate(s) for s in loaded.shares],
    )


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    body: TaskUpdateRequest,
    caller_id: CurrentUserId,
    task_svc: WriteTaskService,
):
    """Update supplied fields. Send version to reject the write if the task changed meanwhile (409)."""
    updated = await task_svc.update_task(
        task_id, caller_id, body.changes(), expected_version=body.version
    )
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", status_code=204)
async def delete_task(
    task_id: str, caller_id: CurrentUserId, task_svc: WriteTaskService
) -> Response:
    """Delete a task and all its shares (owner only)."""
    await task_svc.delete_task(task_id, caller_id)
    return Response(status_code=204)


@router.post("/{task_id}/share", response_model=ShareResponse)
async def share_task(
    task_id: str,
    body: ShareCreateRequest,
    caller_id: CurrentUserId,
    task_svc: WriteTaskService,
):
    """Share a task with another user, or change that user's permission (owner only)."""
    share = await task_svc.share_task(
        task_id, caller_id, body.shared_with_id, body.permission
    )
    return ShareResponse.model_validate(share)


@router.delete("/{task_id}/share/{share_id}", status_code=204)
async def remove_share(
    task_id: str,
    share_id: str,
    caller_id: CurrentUserId,
    task_svc: WriteTaskService,
) -> Response:
    """Revoke a share (owner only)."""
    await task_svc.remove_share(task_id, share_id, caller_id)
    return Response(status_code=204)


@router.get("/{task_id}/shares", response_model=list[SharedUserResponse])
async def list_shares(
    task_id: str, caller_id: CurrentUserId, task_svc: ReadTaskService
):
    """List shares of a task with grantee name and email (owner only)."""
    shares = await task_svc.list_shares(task_id, caller_id)
    return [SharedUserResponse.model_validate(s) for s in shares]
