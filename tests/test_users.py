"""Tests for user registration, login and profile."""
import pytest
from sqlalchemy import event as sa_event, insert

from events_backend.errors import ConflictError
from events_backend.models.user import User
from events_backend.services import auth_service
from tests.conftest import auth_headers, create_test_user


def _register(client, **overrides):
    payload = {
        "username": "johndoe",
        "password": "password123",
        "retyped_password": "password123",
        "email": "john@example.com",
        "first_name": "John",
        "last_name": "Doe",
    }
    payload.update(overrides)
    return client.post("/api/users/", json=payload)


class TestUserRegistration:

    def test_create_user(self, client):
        resp = _register(client)
        assert resp.status_code == 201
        data = resp.json()
        assert data["username"] == "johndoe"
        assert data["email"] == "john@example.com"
        assert data["token"]
        assert "password" not in data

    def test_password_is_hashed(self, client, db):
        _register(client)
        user = db.query(User).filter(User.username == "johndoe").one()
        assert user.password != "password123"
        assert user.password.startswith("$2")

    def test_duplicate_username(self, client):
        _register(client)
        resp = _register(client, email="other@example.com")
        assert resp.status_code == 409

    def test_duplicate_email(self, client):
        _register(client)
        resp = _register(client, username="janedoe")
        assert resp.status_code == 409

    def test_username_taken_between_check_and_insert(self, db, db_engine):
        """A row committed by another connection after the lookup still yields Conflict."""
        fired = []

        @sa_event.listens_for(db_engine, "before_cursor_execute")
        def _register_concurrently(conn, cursor, statement, parameters, context, executemany):
            if fired or not statement.lstrip().upper().startswith("INSERT INTO USERS"):
                return
            fired.append(statement)
            with db_engine.begin() as other:
                other.execute(insert(User).values(
                    username="racer", password="x", email="racer@example.com",
                    first_name="Other", last_name="Racer",
                ))

        try:
            with pytest.raises(ConflictError):
                auth_service.create_user(db, {
                    "username": "racer",
                    "password": "password123",
                    "email": "racer2@example.com",
                    "first_name": "Test",
                    "last_name": "Racer",
                })
        finally:
            sa_event.remove(db_engine, "before_cursor_execute", _register_concurrently)

        assert fired
        # The session was rolled back and is usable again
        assert db.query(User).filter(User.username == "racer").one().email == "racer@example.com"

    def test_passwords_must_match(self, client):
        resp = _register(client, retyped_password="password124")
        assert resp.status_code == 422

    def test_invalid_input(self, client):
        resp = _register(client, username="joe", email="not-an-email", first_name="J")
        assert resp.status_code == 422
        fields = {err["loc"][-1] for err in resp.json()["detail"]}
        assert {"username", "email", "first_name"} <= fields


class TestLogin:

    def test_login(self, client):
        user = create_test_user(client, username="loginuser", password="secret123")
        resp = client.post("/api/auth/login", json={"username": "loginuser", "password": "secret123"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["user_id"] == user["id"]
        assert data["first_name"] == "Test"
        assert data["token"]

    def test_login_wrong_password(self, client):
        create_test_user(client, username="loginuser", password="secret123")
        resp = client.post("/api/auth/login", json={"username": "loginuser", "password": "wrong-pass"})
        assert resp.status_code == 401
        assert resp.headers["www-authenticate"] == "Bearer"

    def test_login_unknown_user(self, client):
        resp = client.post("/api/auth/login", json={"username": "nobody", "password": "secret123"})
        assert resp.status_code == 401

    def test_login_token_authenticates(self, client):
        create_test_user(client, username="loginuser", password="secret123")
        token = client.post(
            "/api/auth/login", json={"username": "loginuser", "password": "secret123"}
        ).json()["token"]
        resp = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200
        assert resp.json()["username"] == "loginuser"


class TestProfile:

    def test_profile(self, client):
        user = create_test_user(client)
        resp = client.get("/api/auth/profile", headers=auth_headers(user))
        assert resp.status_code == 200
        data = resp.json()
        assert data["id"] == user["id"]
        assert "password" not in data

    def test_profile_unauthenticated(self, client):
        assert client.get("/api/auth/profile").status_code == 401

    def test_profile_expired_token(self, client, monkeypatch):
        from events_backend.config import settings
        user = create_test_user(client)
        monkeypatch.setattr(settings, "AUTH_TOKEN_EXPIRES_MINUTES", -1)
        login = client.post("/api/auth/login", json={"username": "testuser", "password": "secret123"})
        resp = client.get(
            "/api/auth/profile", headers={"Authorization": f"Bearer {login.json()['token']}"}
        )
        assert resp.status_code == 401
        # Tokens issued earlier stay valid
        assert client.get("/api/auth/profile", headers=auth_headers(user)).status_code == 200

    def test_token_for_deleted_user(self, client, db):
        user = create_test_user(client)
        db.query(User).filter(User.id == user["id"]).delete()
        db.commit()
        resp = client.get("/api/auth/profile", headers=auth_headers(user))
        assert resp.status_code == 401
