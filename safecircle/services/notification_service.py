"""Notification retrieval."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from safecircle.core.errors import NotFound
from safecircle.models.notification import Notification


def list_for_recipient(db: Session, user_id: int) -> list[Notification]:
    """Notifications addressed to user_id, newest first."""
    result = db.execute(
        select(Notification)
        .where(Notification.recipient_id == user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
    )
    return list(result.scalars().all())


def mark_read(db: Session, notification_id: int, user_id: int) -> Notification:
    """Mark one of the recipient's notifications as read."""
    notification = db.get(Notification, notification_id)
    if not notification or notification.recipient_id != user_id:
        raise NotFound("Notification not found")
    notification.is_read = True
    db.commit()
    db.refresh(notification)
    return notification
