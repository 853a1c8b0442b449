"""TaskShare ORM model. One row per (task, grantee); unique constraint enforces it."""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from taskshare.domain.enums import SharePermission
from taskshare.infrastructure.persistence.database import Base
from taskshare.infrastructure.persistence.models.mixins import CuidMixin
from taskshare.shared.utils.datetime import utc_now


class TaskShare(CuidMixin, Base):
    """Grant of a permission on a task to a user other than its owner. Table: task_share."""

    __tablename__ = "task_share"

    task_id: Mapped[str] = mapped_column(
        String, ForeignKey("task.id", ondelete="CASCADE"), nullable=False
    )
    shared_with_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    permission: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=SharePermission.VIEW.value,
        server_default=SharePermission.VIEW.value,
    )
    shared_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("task_id", "shared_with_id", name="uq_task_share_task_user"),
        Index("ix_task_share_task", "task_id"),
        Index("ix_task_share_user", "shared_with_id"),
        CheckConstraint(
            "permission IN ('view', 'edit', 'admin')",
            name="ck_task_share_permission",
        ),
    )
