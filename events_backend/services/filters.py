"""Event listing filters.

Each recognised criterion becomes one SQL predicate; absent criteria add
nothing. Callers pass the predicates to ``Query.filter``, which ANDs them.
"""
from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import TypeAdapter

from events_backend.models.attendee import Attendee
from events_backend.models.event import Event

_datetime = TypeAdapter(datetime)


def parse_when(value: Union[str, datetime]) -> datetime:
    """Parse an ISO date-time into the naive-UTC form stored in ``events.when``."""
    if isinstance(value, str):
        value = _datetime.validate_python(value)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def build_event_filters(
    start_date: Optional[Union[str, datetime]] = None,
    end_date: Optional[Union[str, datetime]] = None,
    organizer_id: Optional[int] = None,
    attended_by_user_id: Optional[int] = None,
) -> list:
    """Translate optional criteria into a list of conjunctive predicates.

    ``attended_by_user_id`` filters on ``Attendee.user_id``; the query it is
    applied to must join ``Event.attendees``.
    """
    predicates = []

    if start_date is not None and end_date is not None:
        predicates.append(Event.when.between(parse_when(start_date), parse_when(end_date)))
    elif start_date is not None:
        predicates.append(Event.when >= parse_when(start_date))
    elif end_date is not None:
        predicates.append(Event.when <= parse_when(end_date))

    if organizer_id is not None:
        predicates.append(Event.organizer_id == organizer_id)

    if attended_by_user_id is not None:
        predicates.append(Attendee.user_id == attended_by_user_id)

    return predicates
