"""Incident log."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from safecircle.core.errors import InvalidInput, NotFound
from safecircle.models.incident import Incident
from safecircle.models.user import User
from safecircle.schemas.incident import IncidentCreate, IncidentUpdate


def list_incidents(db: Session) -> list[Incident]:
    """All incidents, newest first."""
    result = db.execute(select(Incident).order_by(Incident.created_at.desc(), Incident.id.desc()))
    return list(result.scalars().all())


def get_incident(db: Session, incident_id: int) -> Incident:
    incident = db.get(Incident, incident_id)
    if not incident:
        raise NotFound("Incident not found")
    return incident


def create_incident(db: Session, data: IncidentCreate) -> Incident:
    """Record an incident for an existing reporting user."""
    if db.get(User, data.user_id) is None:
        raise InvalidInput("Reporting user does not exist")
    incident = Incident(
        type=data.type,
        description=data.description,
        user_id=data.user_id,
        latitude=data.latitude,
        longitude=data.longitude,
    )
    db.add(incident)
    db.commit()
    db.refresh(incident)
    return incident


def update_incident(db: Session, incident_id: int, data: IncidentUpdate) -> Incident:
    """Apply the fields present in data; null clears a coordinate. Any status may follow any other."""
    incident = get_incident(db, incident_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "status":
            value = value.value
        setattr(incident, field, value)
    db.commit()
    db.refresh(incident)
    return incident


def delete_incident(db: Session, incident_id: int) -> None:
    incident = get_incident(db, incident_id)
    db.delete(incident)
    db.commit()
