from __future__ import annotations

from datetime import timedelta

import pytest

from event_manager.auth.session_store import InMemorySessionStore
from event_manager.container import build_services

from fakes import (
    FIXED_NOW,
    InMemoryAdmins,
    InMemoryAttendance,
    InMemoryBackup,
    InMemoryCandidates,
    InMemoryDashboard,
    InMemoryPoints,
    Ledger,
)


@pytest.fixture
def fixed_now(monkeypatch):
    """Freeze the service-layer clock."""

    monkeypatch.setattr("event_manager.attendance.service.today_local", lambda: FIXED_NOW.date())
    return FIXED_NOW


@pytest.fixture
def ledger() -> Ledger:
    return Ledger()


@pytest.fixture
def admins() -> InMemoryAdmins:
    repo = InMemoryAdmins()
    repo.add("admin1", "Aarav")
    return repo


@pytest.fixture
def container(ledger, admins, fixed_now):
    return build_services(
        conn=None,
        admins=admins,
        sessions=InMemorySessionStore(ttl=timedelta(hours=24), clock=lambda: fixed_now),
        candidates=InMemoryCandidates(ledger),
        points=InMemoryPoints(ledger),
        attendance=InMemoryAttendance(ledger),
        dashboard=InMemoryDashboard(ledger),
        backup=InMemoryBackup(ledger),
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from event_manager.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    response = client.post("/api/login", json={"username": "admin1", "password": "Aarav"})
    assert response.status_code == 200
    return client
