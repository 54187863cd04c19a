"""Emergency contact schemas."""

from datetime import datetime

from safecircle.schemas.base import CamelModel


class EmergencyContactCreate(CamelModel):
    contact_id: int


class EmergencyContactResponse(CamelModel):
    """The stored edge."""

    id: int
    user_id: int
    contact_id: int
    created_at: datetime


class ContactResponse(CamelModel):
    """A contact user as listed to the owner of the edge."""

    id: int
    name: str | None = None
    email: str
    phone: str | None = None
    notify: bool
