"""Auth service."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from safecircle.core.errors import DuplicateEmail, InvalidCredentials, InvalidInput
from safecircle.core.security import hash_password, verify_password
from safecircle.models.user import User
from safecircle.schemas.auth import RegisterRequest

MIN_PASSWORD_LENGTH = 8


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get user by email."""
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()


def create_user(db: Session, data: RegisterRequest, rounds: int = 10) -> User:
    """Create a new user. Raises DuplicateEmail if the email is taken."""
    if not data.email or not data.password:
        raise InvalidInput("Email and password are required")
    if len(data.password) < MIN_PASSWORD_LENGTH:
        raise InvalidInput(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if get_user_by_email(db, data.email):
        raise DuplicateEmail()

    user = User(
        email=data.email,
        hashed_password=hash_password(data.password, rounds=rounds),
        name=data.name,
        phone=data.phone,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent registration
        db.rollback()
        raise DuplicateEmail()
    db.refresh(user)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate user by email and password.

    Unknown email and wrong password raise the same InvalidCredentials.
    """
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        raise InvalidCredentials()
    return user
