"""Panic alert API."""

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session

from safecircle.core.deps import CurrentClaims, get_ws_manager
from safecircle.core.ws_manager import ConnectionManager
from safecircle.db.session import get_db
from safecircle.schemas.notification import PanicAlertResponse
from safecircle.services.panic_service import PanicAlertService

router = APIRouter(prefix="/panic-alert", tags=["panic-alert"])


@router.post("", response_model=PanicAlertResponse)
def trigger_panic_alert(
    claims: CurrentClaims,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    channel: ConnectionManager = Depends(get_ws_manager),
):
    """Notify every emergency contact of the caller.

    Responds once the notifications are stored; connected contacts are then
    pushed a ``notification.created`` event.
    """
    service = PanicAlertService(db, channel)
    notifications = service.trigger(claims.user_id)
    events = service.build_events(notifications)
    background_tasks.add_task(service.publish, events)
    return PanicAlertResponse(message="Panic alert sent successfully", notified=len(notifications))
