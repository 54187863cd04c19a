"""Emergency contact model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from safecircle.db.base import Base


class EmergencyContact(Base):
    """Directed edge: contact_id is notified when user_id raises a panic alert."""

    __tablename__ = "emergency_contacts"
    __table_args__ = (
        UniqueConstraint("user_id", "contact_id", name="uq_emergency_contact_user_contact"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    contact_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
