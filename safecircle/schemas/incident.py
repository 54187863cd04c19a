"""Incident schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from safecircle.models.incident import IncidentStatus
from safecircle.schemas.base import CamelModel
from safecircle.schemas.user import UserSummary


class IncidentCreate(CamelModel):
    type: str = Field(min_length=1)
    description: str = Field(min_length=1)
    user_id: int
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class IncidentUpdate(CamelModel):
    """Partial update. Status changes are unconstrained within the enum."""

    type: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    status: IncidentStatus | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @field_validator("type", "description", "status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class IncidentResponse(CamelModel):
    id: int
    type: str
    description: str
    status: IncidentStatus
    user_id: int
    latitude: float | None = None
    longitude: float | None = None
    created_at: datetime
    updated_at: datetime


class IncidentWithUser(IncidentResponse):
    user: UserSummary | None = None
