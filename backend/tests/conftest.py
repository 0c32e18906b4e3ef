"""Pytest fixtures — fresh in-memory store per test, recording notifier, in-memory SQLite."""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from sosrelay.database import Base
from sosrelay.dependencies import get_notifier, get_store
from sosrelay.main import app
from sosrelay.services.notifier import Notifier
from sosrelay.storage.memory import MemoryStore
from sosrelay.storage.sql import SqlStore

# Import all models so they register with Base.metadata
from sosrelay.models.emergency_request import EmergencyRequest  # noqa: F401
from sosrelay.models.user import User                            # noqa: F401


class RecordingNotifier(Notifier):
    """Collects every relay call instead of writing to a serial port."""

    def __init__(self):
        self.calls = []

    def notify(self, latitude, longitude, request_id):
        self.calls.append((latitude, longitude, request_id))


@pytest.fixture(scope="function")
def store():
    return MemoryStore()


@pytest.fixture(scope="function")
def notifier():
    return RecordingNotifier()


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh in-memory SQLite engine for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def sql_store(db_engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    return SqlStore(TestingSession)


def _client_for(store, notifier):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_notifier] = lambda: notifier
    return TestClient(app)


@pytest.fixture(scope="function")
def client(store, notifier):
    """FastAPI TestClient backed by a fresh MemoryStore and a recording notifier."""
    with _client_for(store, notifier) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def sql_client(sql_store, notifier):
    """FastAPI TestClient backed by the SQL store on in-memory SQLite."""
    with _client_for(sql_store, notifier) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Payloads that satisfy each emergency type's required fields
# ---------------------------------------------------------------------------
VALID_PAYLOADS = {
    1: {"emergencyType": 1, "symptoms": "severe headache", "duration": "hours", "severity": 7},
    2: {"emergencyType": 2, "medicalNeed": "pharmacy open late", "urgency": "medium", "travelMode": "walking"},
    3: {"emergencyType": 3, "medications": "insulin pens"},
    4: {"emergencyType": 4, "emergencyDescription": "Car crash on the pass road", "numberOfPeople": "2-3"},
    5: {
        "emergencyType": 5,
        "emergencyDescription": "Climber fell on the north face",
        "numberOfPeople": "1",
        "terrainDescription": "steep scree",
    },
}


def create_test_request(client: TestClient, emergency_type: int = 1, **extra) -> dict:
    """Helper — POST /api/emergency-requests and return response JSON."""
    payload = {**VALID_PAYLOADS[emergency_type], **extra}
    resp = client.post("/api/emergency-requests", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def error_fields(resp) -> set:
    """Field names listed in a 400 validation response."""
    return {err["field"] for err in resp.json()["detail"]["errors"]}
