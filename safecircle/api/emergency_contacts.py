"""Emergency contacts API."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from safecircle.core.deps import CurrentClaims
from safecircle.db.session import get_db
from safecircle.schemas.emergency_contact import (
    ContactResponse,
    EmergencyContactCreate,
    EmergencyContactResponse,
)
from safecircle.services.contact_service import add_contact, list_contacts, remove_contact

router = APIRouter(prefix="/emergency-contacts", tags=["emergency-contacts"])


@router.get("", response_model=list[ContactResponse])
def list_my_contacts(claims: CurrentClaims, db: Session = Depends(get_db)):
    """List the caller's emergency contacts."""
    return list_contacts(db, claims.user_id)


@router.post("", response_model=EmergencyContactResponse, status_code=status.HTTP_201_CREATED)
def add(data: EmergencyContactCreate, claims: CurrentClaims, db: Session = Depends(get_db)):
    """Designate an existing user as one of the caller's emergency contacts."""
    return add_contact(db, claims.user_id, data.contact_id)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove(contact_id: int, claims: CurrentClaims, db: Session = Depends(get_db)):
    """Remove an emergency contact."""
    remove_contact(db, claims.user_id, contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
