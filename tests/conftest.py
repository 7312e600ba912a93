"""Pytest fixtures: throw-away SQLite database for fast, isolated tests."""
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from events_backend import main
from events_backend.config import settings
from events_backend.database import Base, get_db
from events_backend.main import app

# Import all models so they register with Base.metadata
from events_backend.models.user import User                # noqa: F401
from events_backend.models.event import Event              # noqa: F401
from events_backend.models.attendee import Attendee        # noqa: F401
from events_backend.models.school import Subject, Teacher  # noqa: F401

SQLITE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    # SQLite leaves foreign keys unenforced unless asked
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session bound to the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine, monkeypatch):
    """FastAPI TestClient with the database dependency overridden to use SQLite.

    Startup table creation is pointed at the test engine as well, so a test
    session never opens the configured application database.
    """
    monkeypatch.setattr(settings, "DATABASE_URL", SQLITE_URL)
    monkeypatch.setattr(main, "engine", db_engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers to create users/events via the API, return the JSON response dict
# ---------------------------------------------------------------------------
def create_test_user(client: TestClient, username: str = "testuser", password: str = "secret123") -> dict:
    """POST /api/users and return response JSON (includes ``token``)."""
    resp = client.post("/api/users/", json={
        "username": username,
        "password": password,
        "retyped_password": password,
        "email": f"{username}@example.com",
        "first_name": "Test",
        "last_name": "User",
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def auth_headers(user: dict) -> dict:
    return {"Authorization": f"Bearer {user['token']}"}


def create_test_event(client: TestClient, user: dict, name: str = "Test Event",
                      when: str = "2026-03-10T18:00:00") -> dict:
    """POST /api/events as ``user`` and return response JSON."""
    resp = client.post("/api/events/", headers=auth_headers(user), json={
        "name": name,
        "description": "An event for tests",
        "when": when,
        "address": "Street 123",
    })
    assert resp.status_code == 201, resp.text
    return resp.json()
