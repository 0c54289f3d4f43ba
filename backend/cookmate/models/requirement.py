"""Requirement ORM — a resident's request for household help.

Invariants:
    - Always belongs to a User (owner_id FK) whose role was RESIDENT at creation
    - urgency in LOW / MEDIUM / HIGH, default MEDIUM
    - Publicly listed only while is_open

Design Decisions:
    - block/flat_no duplicated from Profile: a requirement may be for another flat
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, Text, Integer, Boolean, DateTime, ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from cookmate.db.base import Base


class Requirement(Base):
    """Requirement entity — a cook/maid need posted by a resident."""
    __tablename__ = "requirements"
    __table_args__ = (
        CheckConstraint(
            "need_type in ('COOK','MAID','BOTH')",
            name="requirements_need_type_check",
        ),
        CheckConstraint(
            "urgency in ('LOW','MEDIUM','HIGH')",
            name="requirements_urgency_check",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    need_type: Mapped[str] = mapped_column(String(10), nullable=False)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    preferred_timing: Mapped[str | None] = mapped_column(Text, nullable=True)
    preferred_price: Mapped[int | None] = mapped_column(Integer, nullable=True)
    block: Mapped[str | None] = mapped_column(Text, nullable=True)
    flat_no: Mapped[str | None] = mapped_column(Text, nullable=True)
    urgency: Mapped[str] = mapped_column(
        String(10), nullable=False, default="MEDIUM",
    )
    is_open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
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

    owner: Mapped["User"] = relationship("User", back_populates="requirements")
