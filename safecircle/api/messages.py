"""Public contact-form messages."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from safecircle.db.session import get_db
from safecircle.schemas.message import MessageCreate, MessageCreated, MessageList, MessageResponse
from safecircle.services.message_service import create_message, list_messages

router = APIRouter(tags=["messages"])


@router.post("/contact", response_model=MessageCreated, status_code=status.HTTP_201_CREATED)
def submit(data: MessageCreate, db: Session = Depends(get_db)):
    """Submit the public contact form."""
    message = create_message(db, data)
    return MessageCreated(message="Message sent successfully", data=MessageResponse.model_validate(message))


@router.get("/messages", response_model=MessageList)
def list_all(db: Session = Depends(get_db)):
    return MessageList(data=[MessageResponse.model_validate(m) for m in list_messages(db)])
