"""Incidents API."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from safecircle.db.session import get_db
from safecircle.schemas.incident import IncidentCreate, IncidentResponse, IncidentUpdate, IncidentWithUser
from safecircle.services.incident_service import (
    create_incident,
    delete_incident,
    get_incident,
    list_incidents,
    update_incident,
)

router = APIRouter(prefix="/incidents", tags=["incidents"])


@router.get("", response_model=list[IncidentWithUser])
def list_all(db: Session = Depends(get_db)):
    """List incidents with their reporter, newest first."""
    return list_incidents(db)


@router.get("/{incident_id}", response_model=IncidentWithUser)
def get_one(incident_id: int, db: Session = Depends(get_db)):
    return get_incident(db, incident_id)


@router.post("", response_model=IncidentResponse, status_code=status.HTTP_201_CREATED)
def create(data: IncidentCreate, db: Session = Depends(get_db)):
    """Report an incident. Coordinates are optional."""
    return create_incident(db, data)


@router.put("/{incident_id}", response_model=IncidentResponse)
def update(incident_id: int, data: IncidentUpdate, db: Session = Depends(get_db)):
    return update_incident(db, incident_id, data)


@router.delete("/{incident_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(incident_id: int, db: Session = Depends(get_db)):
    delete_incident(db, incident_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
