"""SQLAlchemy models."""

from __future__ import annotations

from safecircle.models.emergency_contact import EmergencyContact
from safecircle.models.incident import Incident, IncidentStatus
from safecircle.models.message import Message
from safecircle.models.notification import Notification, NotificationType
from safecircle.models.user import User

__all__ = [
    "User",
    "EmergencyContact",
    "Incident",
    "IncidentStatus",
    "Message",
    "Notification",
    "NotificationType",
]
