"""create tasks table"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_tasks"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("deadline", sa.BigInteger(), nullable=False),
        sa.Column("priority", sa.String(length=10), nullable=False),
        sa.CheckConstraint("priority IN ('HIGH', 'MEDIUM', 'LOW')", name="ck_tasks_priority"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("tasks")
