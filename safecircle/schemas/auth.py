"""Auth schemas."""

from datetime import datetime

from pydantic import EmailStr

from safecircle.schemas.base import CamelModel
from safecircle.schemas.user import UserPublic


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str
    name: str | None = None
    phone: str | None = None


class RegisteredUser(CamelModel):
    id: int
    email: str
    created_at: datetime


class RegisterResponse(CamelModel):
    message: str
    user: RegisteredUser


class LoginResponse(CamelModel):
    user: UserPublic
    access_token: str
