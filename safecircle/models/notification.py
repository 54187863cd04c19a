"""Notification model - one row per recipient per panic alert."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from safecircle.db.base import Base
from safecircle.models.user import User


class NotificationType(str, enum.Enum):
    PANIC_ALERT = "PANIC_ALERT"


PANIC_ALERT_MESSAGE = "has triggered a panic alert. Reach out to them to check that they are safe."


class Notification(Base):
    """Notification delivered to a recipient on behalf of a sender."""

    __tablename__ = "notifications"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    recipient_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    sender_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    sender: Mapped[User] = relationship(foreign_keys=[sender_id], lazy="joined")
