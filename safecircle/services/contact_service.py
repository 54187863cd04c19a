"""Emergency contact registry."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from safecircle.core.errors import AlreadyExists, InvalidInput, NotFound
from safecircle.models.emergency_contact import EmergencyContact
from safecircle.models.user import User


def _get_edge(db: Session, user_id: int, contact_id: int) -> EmergencyContact | None:
    return db.execute(
        select(EmergencyContact).where(
            EmergencyContact.user_id == user_id,
            EmergencyContact.contact_id == contact_id,
        )
    ).scalar_one_or_none()


def list_contacts(db: Session, user_id: int) -> list[User]:
    """Users that user_id has designated as emergency contacts, oldest edge first."""
    result = db.execute(
        select(User)
        .join(EmergencyContact, EmergencyContact.contact_id == User.id)
        .where(EmergencyContact.user_id == user_id)
        .order_by(EmergencyContact.created_at, EmergencyContact.id)
    )
    return list(result.scalars().all())


def add_contact(db: Session, user_id: int, contact_id: int) -> EmergencyContact:
    """Add the edge user_id -> contact_id.

    The contact must be an existing user other than the owner.
    """
    if contact_id == user_id:
        raise InvalidInput("You cannot add yourself as an emergency contact")
    if db.get(User, contact_id) is None:
        raise NotFound("Contact user not found")
    if _get_edge(db, user_id, contact_id):
        raise AlreadyExists("This contact already exists")

    edge = EmergencyContact(user_id=user_id, contact_id=contact_id)
    db.add(edge)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise AlreadyExists("This contact already exists")
    db.refresh(edge)
    return edge


def remove_contact(db: Session, user_id: int, contact_id: int) -> None:
    """Delete the edge user_id -> contact_id."""
    edge = _get_edge(db, user_id, contact_id)
    if edge is None:
        raise NotFound("Contact not found")
    db.delete(edge)
    db.commit()
