"""User ORM model."""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from events_backend.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False, unique=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    email = Column(String(255), nullable=False, unique=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)

    events = relationship("Event", back_populates="organizer")
    attended = relationship("Attendee", back_populates="user")
