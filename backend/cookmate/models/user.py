"""User ORM — the authenticated account and ownership root.

Invariants:
    - auth_id is the identity-provider subject: unique, never updated
    - role is one of RESIDENT / WORKER (CHECK constraint)
    - Re-selecting a role overwrites it; dependent profiles are NOT migrated

Design Decisions:
    - auth_id separate from id: internal FKs never expose the provider subject
    - cascade delete: removing a User removes Profile, WorkerProfile, Requirements
"""

import uuid
from typing import Optional
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from cookmate.db.base import Base


class User(Base):
    """User entity — one per identity-provider subject."""
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role in ('RESIDENT','WORKER')", name="users_role_check"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    auth_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, unique=True,
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    profile: Mapped[Optional["Profile"]] = relationship(
        "Profile", back_populates="user",
        cascade="all, delete-orphan", uselist=False,
    )
    worker_profile: Mapped[Optional["WorkerProfile"]] = relationship(
        "WorkerProfile", back_populates="user",
        cascade="all, delete-orphan", uselist=False,
    )
    requirements: Mapped[list["Requirement"]] = relationship(
        "Requirement", back_populates="owner",
        cascade="all, delete-orphan",
    )
