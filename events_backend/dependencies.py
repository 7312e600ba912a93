"""Request dependencies shared by the routers."""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from events_backend.database import get_db
from events_backend.errors import AuthenticationError
from events_backend.models.user import User
from events_backend.services import auth_service

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer token to a stored user."""
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    return auth_service.get_user_for_token(db, credentials.credentials)
