"""Task ORM model. Owned by one user, versioned for optimistic locking."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskshare.domain.enums import TaskStatus
from taskshare.infrastructure.persistence.database import Base
from taskshare.infrastructure.persistence.models.mixins import (
    CuidMixin,
    TimestampMixin,
    VersionedMixin,
)


class Task(CuidMixin, TimestampMixin, VersionedMixin, Base):
    """Task owned by owner_id. Table: task. owner_id never changes after insert."""

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=TaskStatus.TODO.value,
        server_default=TaskStatus.TODO.value,
    )
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    owner_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("ix_task_owner", "owner_id"),
        Index("ix_task_status", "status"),
    )
