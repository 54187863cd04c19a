"""Contact-form messages."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from safecircle.models.message import Message
from safecircle.schemas.message import MessageCreate


def create_message(db: Session, data: MessageCreate) -> Message:
    message = Message(name=data.name, email=data.email, subject=data.subject, message=data.message)
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def list_messages(db: Session) -> list[Message]:
    result = db.execute(select(Message).order_by(Message.created_at.desc(), Message.id.desc()))
    return list(result.scalars().all())
