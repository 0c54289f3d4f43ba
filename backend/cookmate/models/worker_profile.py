"""WorkerProfile ORM — service-provider attributes for a WORKER.

Invariants:
    - Exactly one WorkerProfile per User (user_id UNIQUE)
    - worker_type in COOK / MAID / BOTH; cuisine in NORTH / SOUTH / BOTH or NULL
    - experience_yrs >= 0, charges >= 1 (enforced by schemas and CHECK constraints)
    - Only written while the owning User has role WORKER (checked by the service layer)

Design Decisions:
    - time_slots as JSON: arbitrary client-defined structure, never queried
    - rating / rating_count kept for display; no endpoint writes them yet
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, Text, Integer, Float, DateTime, JSON, ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from cookmate.db.base import Base


class WorkerProfile(Base):
    """WorkerProfile entity — cook/maid offering details."""
    __tablename__ = "worker_profiles"
    __table_args__ = (
        CheckConstraint(
            "worker_type in ('COOK','MAID','BOTH')",
            name="worker_profiles_worker_type_check",
        ),
        CheckConstraint(
            "cuisine is null or cuisine in ('NORTH','SOUTH','BOTH')",
            name="worker_profiles_cuisine_check",
        ),
        CheckConstraint("experience_yrs >= 0", name="worker_profiles_experience_check"),
        CheckConstraint("charges >= 1", name="worker_profiles_charges_check"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    worker_type: Mapped[str] = mapped_column(String(10), nullable=False)
    cuisine: Mapped[str | None] = mapped_column(String(10), nullable=True)
    experience_yrs: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    charges: Mapped[int] = mapped_column(Integer, nullable=False)
    long_term_offer: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    rating_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    time_slots: Mapped[dict | None] = mapped_column(JSON, nullable=True)
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
    user: Mapped["User"] = relationship("User", back_populates="worker_profile")
    service_posts: Mapped[list["ServicePost"]] = relationship(
        "ServicePost", back_populates="worker",
        cascade="all, delete-orphan",
    )
