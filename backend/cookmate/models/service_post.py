"""ServicePost ORM — a listing published by a worker.

Invariants:
    - Always belongs to a WorkerProfile (worker_id FK); ownership is derived
      through worker_profiles.user_id -> users.auth_id, never from the client
    - price >= 1
    - Publicly listed only while is_active
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, Text, Integer, Boolean, DateTime, JSON, ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from cookmate.db.base import Base


class ServicePost(Base):
    """ServicePost entity — a cook/maid offering visible to residents."""
    __tablename__ = "service_posts"
    __table_args__ = (
        CheckConstraint(
            "cuisine is null or cuisine in ('NORTH','SOUTH','BOTH')",
            name="service_posts_cuisine_check",
        ),
        CheckConstraint("price >= 1", name="service_posts_price_check"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    worker_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("worker_profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    cuisine: Mapped[str | None] = mapped_column(String(10), nullable=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    service_area: Mapped[str | None] = mapped_column(Text, nullable=True)
    available_timing: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    time_slots: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
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

    worker: Mapped["WorkerProfile"] = relationship(
        "WorkerProfile", back_populates="service_posts",
    )
