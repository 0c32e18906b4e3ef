"""Tests for the catalog, the positioning probe, health and error rendering."""
from fastapi.testclient import TestClient

from sosrelay.dependencies import get_store
from sosrelay.main import app


class TestCatalog:

    def test_list_types(self, client):
        resp = client.get("/api/emergency-types")
        assert resp.status_code == 200
        types = resp.json()
        assert [t["id"] for t in types] == [1, 2, 3, 4, 5]
        assert types[4]["title"] == "Helicopter Evacuation"
        assert types[0]["estimatedResponse"] == "5-15 minutes"

    def test_get_type(self, client):
        resp = client.get("/api/emergency-types/3")
        assert resp.status_code == 200
        assert resp.json()["title"] == "Medicine Delivery"

    def test_unknown_type(self, client):
        assert client.get("/api/emergency-types/6").status_code == 404


class TestProbes:

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_galileo_status(self, client):
        data = client.get("/api/galileo-sar/status").json()
        assert data["status"] == "operational"
        assert data["satellites"] == {"available": 24, "total": 30}
        assert 0 <= data["signalStrength"] <= 1
        assert data["lastUpdated"]


class BrokenStore:
    def get_emergency_request(self, request_id):
        raise RuntimeError("connection string with password=hunter2")


class TestInternalErrors:

    def test_unexpected_error_is_generic_500(self):
        app.dependency_overrides[get_store] = lambda: BrokenStore()
        try:
            with TestClient(app, raise_server_exceptions=False) as c:
                resp = c.get("/api/emergency-requests/1")
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal server error"}
        assert "hunter2" not in resp.text
