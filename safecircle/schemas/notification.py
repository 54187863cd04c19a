"""Notification schemas."""

from datetime import datetime

from safecircle.models.notification import NotificationType
from safecircle.schemas.base import CamelModel
from safecircle.schemas.user import SenderSummary


class NotificationResponse(CamelModel):
    id: int
    recipient_id: int
    sender_id: int
    type: NotificationType
    message: str
    is_read: bool
    created_at: datetime


class NotificationWithSender(NotificationResponse):
    sender: SenderSummary | None = None


class PanicAlertResponse(CamelModel):
    message: str
    notified: int
