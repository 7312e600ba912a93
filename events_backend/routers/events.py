"""Event API routes: delegates to event_service for ownership checks and listings."""
import logging
from typing import Optional
from datetime import datetime
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from events_backend.database import get_db
from events_backend.dependencies import get_current_user
from events_backend.models.user import User
from events_backend.schemas.event import AttendeeOut, EventCreate, EventOut, EventUpdate, PaginatedEvents
from events_backend.services import attendee_service, event_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=PaginatedEvents)
def list_events(
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    limit: int = Query(10, ge=0, le=10),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """List events with attendee counts and optional date range."""
    return event_service.list_events(
        db, start_date=start_date, end_date=end_date, limit=limit, offset=offset,
    )


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int, db: Session = Depends(get_db)):
    """Fetch a single event with attendee counts."""
    return event_service.get_event_detail(db, event_id)


@router.get("/{event_id}/attendees", response_model=list[AttendeeOut])
def list_event_attendees(event_id: int, db: Session = Depends(get_db)):
    return attendee_service.find_by_event_id(db, event_id)


@router.post("/", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create an event organized by the current user."""
    return event_service.create_event(db, payload.model_dump(), current_user)


@router.patch("/{event_id}", response_model=EventOut)
def update_event(
    event_id: int,
    payload: EventUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Partially update an event (organizer only)."""
    return event_service.update_event(db, event_id, payload.model_dump(exclude_unset=True), current_user)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete an event and its attendees (organizer only)."""
    event_service.delete_event(db, event_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
