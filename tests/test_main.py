"""Tests for application wiring: health check and startup table creation."""
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event as sa_event, inspect

from events_backend import database, main
from events_backend.main import app


class TestHealth:

    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestStartup:

    def test_startup_creates_tables_on_bound_engine(self, monkeypatch, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'startup.db'}")
        monkeypatch.setattr(main, "engine", engine)
        try:
            with TestClient(app):
                pass
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        assert {"users", "events", "attendees", "teachers", "subjects"} <= tables

    def test_test_session_leaves_default_database_alone(self, client):
        checkouts = []

        @sa_event.listens_for(database.engine, "checkout")
        def _record(dbapi_conn, connection_record, connection_proxy):
            checkouts.append(connection_record)

        try:
            with TestClient(app) as again:
                assert again.get("/api/health").status_code == 200
        finally:
            sa_event.remove(database.engine, "checkout", _record)

        assert checkouts == []
