"""Initial schema — users, profiles, groups, memberships.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("email", sa.String(320), nullable=True, unique=True),
        sa.Column("image", sa.String(2000), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "profiles",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("school", sa.String(20), nullable=False),
        sa.Column("assigned_sex", sa.String(20), nullable=False),
        sa.Column("pronouns", sa.String(50), nullable=True),
        sa.Column("alcohol", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("committed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("day_volume", sa.String(20), nullable=False),
        sa.Column("night_volume", sa.String(20), nullable=False),
        sa.Column("drugs", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("neatness", sa.Integer, nullable=False, server_default="50"),
        sa.Column("snore", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("social_energy_level", sa.Integer, nullable=False, server_default="50"),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "groups",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "memberships",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("role", sa.String(10), nullable=False, server_default="MEMBER"),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("group_id", sa.String(36), sa.ForeignKey("groups.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_memberships_group_id", "memberships", ["group_id"])


def downgrade() -> None:
    op.drop_index("ix_memberships_group_id", table_name="memberships")
    op.drop_table("memberships")
    op.drop_table("groups")
    op.drop_table("profiles")
    op.drop_table("users")
