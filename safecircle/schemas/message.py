"""Contact-form message schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from safecircle.schemas.base import CamelModel


class MessageCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class MessageResponse(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime


class MessageCreated(CamelModel):
    success: bool = True
    message: str
    data: MessageResponse


class MessageList(CamelModel):
    success: bool = True
    data: list[MessageResponse]
