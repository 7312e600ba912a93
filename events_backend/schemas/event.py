"""Pydantic schemas for Events and Attendees."""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from events_backend.models.attendee import AttendeeAnswer


class EventCreate(BaseModel):
    name: str = Field(min_length=5, max_length=255)
    description: str = Field(min_length=5, max_length=255)
    when: datetime
    address: str = Field(min_length=5, max_length=255)


class EventUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=5, max_length=255)
    description: Optional[str] = Field(default=None, min_length=5, max_length=255)
    when: Optional[datetime] = None
    address: Optional[str] = Field(default=None, min_length=5, max_length=255)


class EventOut(BaseModel):
    id: int
    name: str
    description: str
    when: datetime
    address: str
    organizer_id: Optional[int] = None
    attendee_count: Optional[int] = None
    attendee_accepted: Optional[int] = None
    attendee_maybe: Optional[int] = None
    attendee_rejected: Optional[int] = None

    model_config = {"from_attributes": True}

    @field_validator("when")
    @classmethod
    def when_as_utc(cls, value: datetime) -> datetime:
        """Stored times are naive UTC; serialise them with an explicit offset."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class PaginatedEvents(BaseModel):
    total: int
    data: list[EventOut]


class AttendeeAnswerIn(BaseModel):
    answer: AttendeeAnswer = AttendeeAnswer.accepted


class AttendeeOut(BaseModel):
    id: int
    user_id: int
    answer: AttendeeAnswer

    model_config = {"from_attributes": True}
