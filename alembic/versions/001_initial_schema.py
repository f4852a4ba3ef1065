"""Initial schema - role, activity_log, role_assignment.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False, server_default=""),
        sa.Column("permissions", JSONB(), nullable=False, server_default="{}"),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("last_modified_by", sa.String(255), nullable=True),
        sa.Column("last_modified_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("color", sa.String(20), nullable=False, server_default="default"),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
    )
    # Names are unique case-insensitively.
    op.create_index("ix_role_name_lower", "role", [sa.text("lower(name)")], unique=True)

    # No FK to role: entries outlive deleted roles.
    op.create_table(
        "activity_log",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("action", sa.String(50), nullable=False),
        sa.Column("role_id", sa.UUID(), nullable=False),
        sa.Column("performed_by", sa.String(255), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("details", sa.Text(), nullable=False, server_default=""),
    )
    op.create_index("ix_activity_log_role_timestamp", "activity_log", ["role_id", "timestamp"])

    op.create_table(
        "role_assignment",
        sa.Column("user_id", sa.String(255), primary_key=True),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id"), primary_key=True),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_role_assignment_role_id", "role_assignment", ["role_id"])


def downgrade() -> None:
    op.drop_table("role_assignment")
    op.drop_table("activity_log")
    op.drop_table("role")
