"""Current user's event attendance routes."""
import logging
from typing import Optional
from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from events_backend.database import get_db
from events_backend.dependencies import get_current_user
from events_backend.errors import NotFoundError
from events_backend.models.user import User
from events_backend.schemas.event import AttendeeAnswerIn, AttendeeOut, PaginatedEvents
from events_backend.services import attendee_service, event_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=PaginatedEvents)
def list_attended_events(
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    limit: int = Query(10, ge=0, le=10),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Events the current user has answered, newest first."""
    return event_service.list_events_attended_by(
        db, current_user.id, start_date=start_date, end_date=end_date, limit=limit, offset=offset,
    )


@router.get("/{event_id}", response_model=AttendeeOut)
def get_attendance(
    event_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    attendee = attendee_service.find_one_by_event_id_and_user_id(db, event_id, current_user.id)
    if not attendee:
        raise NotFoundError("Attendance not found")
    return attendee


@router.put("/{event_id}", response_model=AttendeeOut)
def set_attendance(
    event_id: int,
    payload: AttendeeAnswerIn,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Set or update the current user's answer for an event."""
    return attendee_service.create_or_update(db, event_id, current_user.id, payload.answer)
