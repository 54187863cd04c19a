"""User schemas."""

from __future__ import annotations

from datetime import datetime

from safecircle.schemas.base import CamelModel


class UserPublic(CamelModel):
    """User projection safe to return to clients (no password hash)."""

    id: int
    email: str
    name: str | None = None
    phone: str | None = None
    notify: bool
    role: str
    created_at: datetime


class UserSummary(CamelModel):
    id: int
    name: str | None = None
    email: str


class SenderSummary(CamelModel):
    name: str | None = None
    phone: str | None = None
