"""Task and share API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from taskshare.domain.enums import SharePermission, TaskStatus


class TaskCreateRequest(BaseModel):
    """Request body for creating a task."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = Field(default=None)
    status: TaskStatus = Field(default=TaskStatus.TODO)
    due_date: datetime | None = Field(default=None)


class TaskUpdateRequest(BaseModel):
    """Partial update. Only fields present in the body change.

    version is the expected current version; omit it to skip the conflict check.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None
    version: int | None = Field(default=None, ge=0)

    def changes(self) -> dict:
        """Fields explicitly sent by the client, excluding version."""
        return self.model_dump(exclude_unset=True, exclude={"version"})


class ShareCreateRequest(BaseModel):
    """Request body for sharing a task."""

    shared_with_id: str = Field(..., min_length=1)
    permission: SharePermission = Field(default=SharePermission.VIEW)


class ShareResponse(BaseModel):
    """Share record."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    task_id: str
    shared_with_id: str
    permission: SharePermission
    shared_at: datetime


class SharedUserResponse(BaseModel):
    """Share joined with grantee name and email (list-shares)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    shared_with_id: str
    permission: SharePermission
    shared_at: datetime
    name: str | None
    email: str | None


class TaskResponse(BaseModel):
    """Task record."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str | None
    status: TaskStatus
    due_date: datetime | None
    owner_id: str
    version: int
    created_at: datetime
    updated_at: datetime


class TaskDetailResponse(TaskResponse):
    """Task with its shares (GET /tasks/{id})."""

    shares: list[ShareResponse] = Field(default_factory=list)
