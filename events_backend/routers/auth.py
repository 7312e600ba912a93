"""Authentication API routes."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from events_backend.database import get_db
from events_backend.dependencies import get_current_user
from events_backend.models.user import User
from events_backend.schemas.user import LoginRequest, LoginResponse, UserOut
from events_backend.services import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """Exchange username/password for a bearer token."""
    user = auth_service.validate_user(db, payload.username, payload.password)
    logger.info("User %s logged in", user.id)
    return {
        "user_id": user.id,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "token": auth_service.get_token_for_user(user),
    }


@router.get("/profile", response_model=UserOut)
def get_profile(current_user: User = Depends(get_current_user)):
    return current_user
