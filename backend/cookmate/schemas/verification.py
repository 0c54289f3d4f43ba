"""Verification Schemas — admin verification body."""

from uuid import UUID

from cookmate.schemas import CamelModel


class AdminVerifyRequest(CamelModel):
    """Target by users.id or by identity subject; at least one is required."""
    user_id: UUID | None = None
    auth_id: UUID | None = None
    verified: bool = True
