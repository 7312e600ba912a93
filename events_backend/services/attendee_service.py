"""Attendee lookups and the answer upsert."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from events_backend.errors import NotFoundError
from events_backend.models.attendee import Attendee, AttendeeAnswer
from events_backend.models.event import Event

logger = logging.getLogger(__name__)


def find_by_event_id(db: Session, event_id: int) -> list[Attendee]:
    return db.query(Attendee).filter(Attendee.event_id == event_id).order_by(Attendee.id).all()


def find_one_by_event_id_and_user_id(db: Session, event_id: int, user_id: int) -> Optional[Attendee]:
    return (
        db.query(Attendee)
        .filter(Attendee.event_id == event_id, Attendee.user_id == user_id)
        .first()
    )


def create_or_update(db: Session, event_id: int, user_id: int, answer: AttendeeAnswer) -> Attendee:
    """Set ``user_id``'s answer for ``event_id``, creating the row on first answer.

    At most one Attendee row exists per (event, user).
    """
    if not db.query(Event.id).filter(Event.id == event_id).first():
        raise NotFoundError("Event not found")

    attendee = find_one_by_event_id_and_user_id(db, event_id, user_id)
    if attendee is None:
        attendee = Attendee(event_id=event_id, user_id=user_id)
        db.add(attendee)

    attendee.answer = answer
    db.commit()
    db.refresh(attendee)
    logger.info("User %s answered '%s' to event %s", user_id, answer.value, event_id)
    return attendee
