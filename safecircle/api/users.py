"""User lookup."""

from fastapi import APIRouter, Depends
from pydantic import EmailStr
from sqlalchemy.orm import Session

from safecircle.core.errors import InvalidInput, NotFound
from safecircle.db.session import get_db
from safecircle.schemas.user import UserPublic
from safecircle.services.auth_service import get_user_by_email

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserPublic)
def find_by_email(email: EmailStr | None = None, db: Session = Depends(get_db)):
    """Look a user up by email, e.g. before adding them as a contact."""
    if not email:
        raise InvalidInput("The email parameter is required")
    user = get_user_by_email(db, email)
    if not user:
        raise NotFound("User not found")
    return user
