"""Core event service.

Responsibilities:
- Listings: filters, attendee-count projection, id-descending order, pagination
- Detail lookup with attendee counts
- Authorization hook: only the organizer may update/delete
- Create / update / delete with attendee cascade
"""
import logging
from datetime import datetime
from typing import Any, Optional, Union

from sqlalchemy.orm import Query, Session

from events_backend.errors import ForbiddenError, NotFoundError
from events_backend.models.attendee import Attendee, AttendeeAnswer
from events_backend.models.event import Event
from events_backend.models.user import User
from events_backend.services.filters import build_event_filters, parse_when
from events_backend.services.pagination import PaginationResult, paginate
from events_backend.services.projections import with_relation_counts

logger = logging.getLogger(__name__)

ATTENDEE_COUNTS = {
    "attendee_count": None,
    "attendee_accepted": Attendee.answer == AttendeeAnswer.accepted,
    "attendee_maybe": Attendee.answer == AttendeeAnswer.maybe,
    "attendee_rejected": Attendee.answer == AttendeeAnswer.rejected,
}


def _events_base_query(db: Session) -> Query:
    return db.query(Event).order_by(Event.id.desc())


def _events_with_attendees_base_query(db: Session) -> Query:
    return with_relation_counts(_events_base_query(db), Event.attendees, ATTENDEE_COUNTS)


def _check_authorization(event: Event, actor: User) -> None:
    """Only the organizer may update/delete."""
    if event.organizer_id != actor.id:
        raise ForbiddenError("You are not authorized to change this event")


def _get_event_for_update(db: Session, event_id: int) -> Event:
    # Row lock keeps the ownership check and the write in one transaction.
    event = db.query(Event).filter(Event.id == event_id).with_for_update().first()
    if not event:
        raise NotFoundError("Event not found")
    return event


def list_events(
    db: Session,
    start_date: Optional[Union[str, datetime]] = None,
    end_date: Optional[Union[str, datetime]] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> PaginationResult:
    """All events with attendee counts, newest first."""
    query = _events_with_attendees_base_query(db).filter(
        *build_event_filters(start_date=start_date, end_date=end_date)
    )
    logger.debug("%s", query)
    return paginate(query, limit=limit, offset=offset)


def list_events_organized_by(
    db: Session,
    user_id: int,
    start_date: Optional[Union[str, datetime]] = None,
    end_date: Optional[Union[str, datetime]] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> PaginationResult:
    """Events organized by ``user_id`` with attendee counts, newest first."""
    query = _events_with_attendees_base_query(db).filter(
        *build_event_filters(start_date=start_date, end_date=end_date, organizer_id=user_id)
    )
    logger.debug("%s", query)
    return paginate(query, limit=limit, offset=offset)


def list_events_attended_by(
    db: Session,
    user_id: int,
    start_date: Optional[Union[str, datetime]] = None,
    end_date: Optional[Union[str, datetime]] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> PaginationResult:
    """Events ``user_id`` has answered, newest first. No attendee counts."""
    query = (
        _events_base_query(db)
        .outerjoin(Event.attendees)
        .filter(*build_event_filters(start_date=start_date, end_date=end_date, attended_by_user_id=user_id))
    )
    logger.debug("%s", query)
    return paginate(query, limit=limit, offset=offset)


def get_event(db: Session, event_id: int) -> Optional[Event]:
    """Single event with attendee counts, or ``None``."""
    return _events_with_attendees_base_query(db).filter(Event.id == event_id).first()


def get_event_detail(db: Session, event_id: int) -> Event:
    event = get_event(db, event_id)
    if not event:
        raise NotFoundError("Event not found")
    return event


def create_event(db: Session, payload: dict[str, Any], actor: User) -> Event:
    """Create an event organized by ``actor``."""
    event = Event(
        name=payload["name"],
        description=payload["description"],
        when=parse_when(payload["when"]),
        address=payload["address"],
        organizer_id=actor.id,
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Created event '%s' (%s) by organizer %s", event.name, event.id, actor.id)
    return event


def update_event(db: Session, event_id: int, updates: dict[str, Any], actor: User) -> Event:
    """Merge ``updates`` over the stored event. Organizer only."""
    event = _get_event_for_update(db, event_id)
    _check_authorization(event, actor)

    for field, value in updates.items():
        if value is None:
            continue
        if field == "when":
            value = parse_when(value)
        if field in ("name", "description", "when", "address"):
            setattr(event, field, value)

    db.commit()
    db.refresh(event)
    logger.info("Updated event %s", event_id)
    return event


def delete_event(db: Session, event_id: int, actor: User) -> None:
    """Delete an event and its attendees. Organizer only."""
    event = _get_event_for_update(db, event_id)
    _check_authorization(event, actor)

    db.delete(event)
    db.commit()
    logger.info("Deleted event %s", event_id)
