"""Event ORM model.

The ``attendee_*`` attributes are query expressions: they hold per-row
aggregates only when a query asks for them (see
``events_backend.services.projections``) and are ``None`` otherwise.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import query_expression, relationship
from events_backend.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(String(255), nullable=False)
    when = Column(DateTime, nullable=False)
    address = Column(String(255), nullable=False)
    organizer_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    organizer = relationship("User", back_populates="events")
    attendees = relationship("Attendee", back_populates="event", cascade="all, delete-orphan")

    attendee_count = query_expression()
    attendee_accepted = query_expression()
    attendee_maybe = query_expression()
    attendee_rejected = query_expression()
