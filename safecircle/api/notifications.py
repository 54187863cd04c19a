"""Notifications API."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from safecircle.core.deps import CurrentClaims
from safecircle.db.session import get_db
from safecircle.schemas.notification import NotificationResponse, NotificationWithSender
from safecircle.services.notification_service import list_for_recipient, mark_read

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationWithSender])
def list_mine(claims: CurrentClaims, db: Session = Depends(get_db)):
    """Notifications addressed to the caller, newest first, with sender name and phone."""
    return list_for_recipient(db, claims.user_id)


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
def read(notification_id: int, claims: CurrentClaims, db: Session = Depends(get_db)):
    """Mark one of the caller's notifications as read."""
    return mark_read(db, notification_id, claims.user_id)
