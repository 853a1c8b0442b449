"""initial schema: app_user, task, task_share

Revision ID: a1c3e5f7b9d1
Revises:
Create Date: 2026-10-18

task.version starts at 1 and is bumped by conditional UPDATE (optimistic lock).
task_share is unique per (task_id, shared_with_id) so grants upsert in place.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c3e5f7b9d1"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "task",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="todo"),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["owner_id"], ["app_user.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_task_owner", "task", ["owner_id"], unique=False)
    op.create_index("ix_task_status", "task", ["status"], unique=False)
    op.create_table(
        "task_share",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("task_id", sa.String(), nullable=False),
        sa.Column("shared_with_id", sa.String(), nullable=False),
        sa.Column("permission", sa.String(length=16), nullable=False, server_default="view"),
        sa.Column(
            "shared_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["task_id"], ["task.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["shared_with_id"], ["app_user.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint(
            "task_id", "shared_with_id", name="uq_task_share_task_user"
        ),
        sa.CheckConstraint(
            "permission IN ('view', 'edit', 'admin')", name="ck_task_share_permission"
        ),
    )
    op.create_index("ix_task_share_task", "task_share", ["task_id"], unique=False)
    op.create_index(
        "ix_task_share_user", "task_share", ["shared_with_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_task_share_user", table_name="task_share")
    op.drop_index("ix_task_share_task", table_name="task_share")
    op.drop_table("task_share")
    op.drop_index("ix_task_status", table_name="task")
    op.drop_index("ix_task_owner", table_name="task")
    op.drop_table("task")
    op.drop_table("app_user")
