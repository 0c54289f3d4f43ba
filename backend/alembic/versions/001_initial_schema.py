"""Initial schema — users, profiles, worker_profiles, service_posts, requirements.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("auth_id", UUID(as_uuid=True), nullable=False, unique=True),
        sa.Column("role", sa.String(20), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("role in ('RESIDENT','WORKER')", name="users_role_check"),
    )

    op.create_table(
        "profiles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("phone", sa.Text, nullable=False, unique=True),
        sa.Column("block", sa.Text, nullable=True),
        sa.Column("flat_no", sa.Text, nullable=True),
        sa.Column("age", sa.Integer, nullable=True),
        sa.Column("verified", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(),
    )

    op.create_table(
        "worker_profiles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("worker_type", sa.String(10), nullable=False),
        sa.Column("cuisine", sa.String(10), nullable=True),
        sa.Column("experience_yrs", sa.Integer, nullable=False, server_default="0"),
        sa.Column("charges", sa.Integer, nullable=False),
        sa.Column("long_term_offer", sa.Text, nullable=True),
        sa.Column("rating", sa.Float, nullable=False, server_default="0"),
        sa.Column("rating_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("time_slots", sa.JSON, nullable=True),
        *_timestamps(),
        sa.CheckConstraint("worker_type in ('COOK','MAID','BOTH')", name="worker_profiles_worker_type_check"),
        sa.CheckConstraint("cuisine is null or cuisine in ('NORTH','SOUTH','BOTH')", name="worker_profiles_cuisine_check"),
        sa.CheckConstraint("experience_yrs >= 0", name="worker_profiles_experience_check"),
        sa.CheckConstraint("charges >= 1", name="worker_profiles_charges_check"),
    )

    op.create_table(
        "service_posts",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("worker_id", UUID(as_uuid=True), sa.ForeignKey("worker_profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("cuisine", sa.String(10), nullable=True),
        sa.Column("price", sa.Integer, nullable=False),
        sa.Column("service_area", sa.Text, nullable=True),
        sa.Column("available_timing", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("time_slots", sa.JSON, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        *_timestamps(),
        sa.CheckConstraint("cuisine is null or cuisine in ('NORTH','SOUTH','BOTH')", name="service_posts_cuisine_check"),
        sa.CheckConstraint("price >= 1", name="service_posts_price_check"),
    )
    op.create_index("ix_service_posts_worker_id", "service_posts", ["worker_id"])

    op.create_table(
        "requirements",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("owner_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("need_type", sa.String(10), nullable=False),
        sa.Column("details", sa.Text, nullable=True),
        sa.Column("preferred_timing", sa.Text, nullable=True),
        sa.Column("preferred_price", sa.Integer, nullable=True),
        sa.Column("block", sa.Text, nullable=True),
        sa.Column("flat_no", sa.Text, nullable=True),
        sa.Column("urgency", sa.String(10), nullable=False, server_default="MEDIUM"),
        sa.Column("is_open", sa.Boolean, nullable=False, server_default="true"),
        *_timestamps(),
        sa.CheckConstraint("need_type in ('COOK','MAID','BOTH')", name="requirements_need_type_check"),
        sa.CheckConstraint("urgency in ('LOW','MEDIUM','HIGH')", name="requirements_urgency_check"),
    )
    op.create_index("ix_requirements_owner_id", "requirements", ["owner_id"])


def downgrade() -> None:
    op.drop_index("ix_requirements_owner_id", table_name="requirements")
    op.drop_table("requirements")
    op.drop_index("ix_service_posts_worker_id", table_name="service_posts")
    op.drop_table("service_posts")
    op.drop_table("worker_profiles")
    op.drop_table("profiles")
    op.drop_table("users")
