"""FastAPI dependencies (composition root): caller identity, TaskService and UserService wiring.

Reads use get_db; writes use get_db_transactional so a request commits as one
unit or rolls back entirely.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskshare.application.use_cases.tasks import TaskService
from taskshare.application.use_cases.users import UserService
from taskshare.domain.exceptions import AuthenticationException
from taskshare.infrastructure.persistence.database import get_db, get_db_transactional
from taskshare.infrastructure.persistence.repositories import (
    TaskRepository,
    TaskShareRepository,
    UserRepository,
)
from taskshare.infrastructure.security.jwt import verify_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the caller id (JWT sub). The identity provider is trusted; no user lookup."""
    if credentials is None:
        raise AuthenticationException("Not authenticated")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException("Invalid or expired token") from e
    return str(payload["sub"])


def _build_task_service(db: AsyncSession) -> TaskService:
    return TaskService(
        task_repo=TaskRepository(db),
        share_repo=TaskShareRepository(db),
        user_directory=UserRepository(db),
    )


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """TaskService on a read session."""
    return _build_task_service(db)


async def get_task_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskService:
    """TaskService on a transactional session (commit on success, rollback on error)."""
    return _build_task_service(db)


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserService:
    """UserService on a read session."""
    return UserService(user_directory=UserRepository(db))


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
ReadTaskService = Annotated[TaskService, Depends(get_task_service)]
WriteTaskService = Annotated[TaskService, Depends(get_task_service_for_write)]
ReadUserService = Annotated[UserService, Depends(get_user_service)]
