"""Panic alert fan-out.

A panic alert becomes one Notification row per emergency contact of the
sender. The rows are written in a single transaction; the realtime push that
follows is best effort and only shortens the time until a connected contact
sees the alert. Contacts that are offline pick it up from GET /notifications.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from safecircle.core.errors import FanOutFailed
from safecircle.core.ws_manager import ConnectionManager
from safecircle.models.notification import PANIC_ALERT_MESSAGE, Notification, NotificationType
from safecircle.schemas.notification import NotificationWithSender
from safecircle.services.contact_service import list_contacts

logger = logging.getLogger(__name__)

NOTIFICATION_EVENT = "notification.created"


class PanicAlertService:
    """Fans a panic alert out to the sender's emergency contacts."""

    def __init__(self, db: Session, channel: ConnectionManager) -> None:
        self.db = db
        self.channel = channel

    def trigger(self, sender_id: int) -> list[Notification]:
        """Persist one PANIC_ALERT notification per distinct contact.

        All rows commit together or none do. Store failures raise
        FanOutFailed; calling twice notifies twice.
        """
        try:
            contacts = list_contacts(self.db, sender_id)
        except SQLAlchemyError as e:
            logger.exception("Panic alert for user=%s: contact lookup failed", sender_id)
            raise FanOutFailed() from e

        recipient_ids = list(dict.fromkeys(c.id for c in contacts))
        notifications = [
            Notification(
                recipient_id=rid,
                sender_id=sender_id,
                type=NotificationType.PANIC_ALERT.value,
                message=PANIC_ALERT_MESSAGE,
                is_read=False,
            )
            for rid in recipient_ids
        ]
        try:
            self.db.add_all(notifications)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Panic alert for user=%s: notification insert failed", sender_id)
            raise FanOutFailed() from e

        logger.info("Panic alert from user=%s fanned out to %s contact(s)", sender_id, len(notifications))
        return notifications

    def build_events(self, notifications: list[Notification]) -> list[tuple[int, dict[str, Any]]]:
        """(recipient_id, payload) pairs for the realtime channel."""
        try:
            return [
                (n.recipient_id, NotificationWithSender.model_validate(n).model_dump(mode="json", by_alias=True))
                for n in notifications
            ]
        except SQLAlchemyError:
            logger.exception("Could not build realtime payloads; contacts will rely on polling")
            return []

    async def publish(self, events: list[tuple[int, dict[str, Any]]]) -> int:
        """Push events to connected recipients. Never raises."""
        delivered = 0
        for recipient_id, payload in events:
            try:
                delivered += await self.channel.send_to_user(recipient_id, NOTIFICATION_EVENT, payload)
            except Exception:
                logger.warning("Realtime push to user=%s failed", recipient_id, exc_info=True)
        logger.debug("Realtime push reached %s session(s) for %s event(s)", delivered, len(events))
        return delivered
