"""Attendee ORM model."""
import enum
from sqlalchemy import Column, ForeignKey, Integer, Enum as SAEnum
from sqlalchemy.orm import relationship
from events_backend.database import Base


class AttendeeAnswer(str, enum.Enum):
    accepted = "Accepted"
    maybe = "Maybe"
    rejected = "Rejected"


class Attendee(Base):
    __tablename__ = "attendees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    answer = Column(SAEnum(AttendeeAnswer), nullable=False, default=AttendeeAnswer.accepted)

    event = relationship("Event", back_populates="attendees")
    user = relationship("User", back_populates="attended")
