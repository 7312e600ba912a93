"""Password hashing, bearer tokens and user registration."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from events_backend.config import settings
from events_backend.errors import AuthenticationError, ConflictError
from events_backend.models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def get_token_for_user(user: User) -> str:
    """Sign a bearer token identifying ``user``."""
    now = datetime.now(timezone.utc)
    payload = {
        "username": user.username,
        "sub": str(user.id),
        "iat": now,
        "exp": now + timedelta(minutes=settings.AUTH_TOKEN_EXPIRES_MINUTES),
    }
    return jwt.encode(payload, settings.AUTH_SECRET, algorithm=settings.AUTH_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry; return the claims."""
    try:
        return jwt.decode(token, settings.AUTH_SECRET, algorithms=[settings.AUTH_ALGORITHM])
    except jwt.PyJWTError as exc:
        logger.debug("Rejected token: %s", exc)
        raise AuthenticationError("Could not validate credentials") from exc


def get_user_for_token(db: Session, token: str) -> User:
    claims = decode_token(token)
    try:
        user_id = int(claims["sub"])
    except (KeyError, ValueError) as exc:
        raise AuthenticationError("Could not validate credentials") from exc

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise AuthenticationError("Could not validate credentials")
    return user


def validate_user(db: Session, username: str, password: str) -> User:
    """Return the user whose bcrypt hash matches ``password``."""
    user = db.query(User).filter(User.username == username).first()
    if not user:
        logger.debug("User %s not found", username)
        raise AuthenticationError("Invalid username or password")

    if not verify_password(password, user.password):
        logger.debug("Invalid credentials for user %s", username)
        raise AuthenticationError("Invalid username or password")

    return user


def create_user(db: Session, payload: dict[str, Any]) -> tuple[User, str]:
    """Register a user; username and email must both be unused."""
    existing = (
        db.query(User)
        .filter(or_(User.username == payload["username"], User.email == payload["email"]))
        .first()
    )
    if existing:
        raise ConflictError("username or email is already taken")

    user = User(
        username=payload["username"],
        email=payload["email"],
        first_name=payload["first_name"],
        last_name=payload["last_name"],
        password=hash_password(payload["password"]),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # A concurrent registration took the username or email after the check above
        db.rollback()
        raise ConflictError("username or email is already taken") from exc
    db.refresh(user)
    logger.info("Created user %s (%s)", user.id, user.username)
    return user, get_token_for_user(user)
