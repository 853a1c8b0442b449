"""Base repository: generic get, create and delete over one ORM model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskshare.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with ORM-level get_by_id, create and delete.

    Subclasses expose DTO-returning methods and keep ORM objects internal.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> Any:
        """Return a single record by primary key, or None."""
        return await self._get_orm_by_id(entity_id)

    async def _get_orm_by_id(
        self, entity_id: str, *, refresh: bool = False
    ) -> ModelType | None:
        """Return ORM row by primary key. refresh=True bypasses the identity map
        (needed after bulk UPDATE/INSERT statements that do not sync the session)."""
        model: Any = self.model
        stmt = select(self.model).where(model.id == entity_id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and return it with server defaults loaded."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        await self.db.delete(obj)
        await self.db.flush()
