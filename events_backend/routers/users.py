"""User API routes."""
import logging
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from events_backend.database import get_db
from events_backend.schemas.event import PaginatedEvents
from events_backend.schemas.user import UserCreate, UserCreated
from events_backend.services import auth_service, event_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    """Register a user and return it with a bearer token."""
    user, token = auth_service.create_user(db, payload.model_dump(exclude={"retyped_password"}))
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "token": token,
    }


@router.get("/{user_id}/events", response_model=PaginatedEvents)
def list_events_organized_by_user(
    user_id: int,
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    limit: int = Query(10, ge=0, le=10),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """Events organized by a user, newest first."""
    return event_service.list_events_organized_by(
        db, user_id, start_date=start_date, end_date=end_date, limit=limit, offset=offset,
    )
