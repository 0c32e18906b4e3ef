"""Tests for the EmergencyRequest endpoints (create, fetch, list)."""
from datetime import datetime, timezone, timedelta
from tests.conftest import VALID_PAYLOADS, create_test_request, error_fields


class TestCreate:
    """POST /api/emergency-requests."""

    def test_create_medical_consultation(self, client):
        resp = client.post("/api/emergency-requests", json={
            "emergencyType": 1,
            "symptoms": "severe headache",
            "duration": "hours",
            "severity": 7,
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["status"] == "pending"
        assert data["emergencyType"] == 1
        assert data["symptoms"] == "severe headache"
        assert data["details"] == {"symptoms": "severe headache", "duration": "hours", "severity": 7}

    def test_create_rejects_short_symptoms(self, client):
        resp = client.post("/api/emergency-requests", json={"emergencyType": 1, "symptoms": "hi"})
        assert resp.status_code == 400
        assert error_fields(resp) == {"symptoms", "duration", "severity"}

    def test_create_every_type(self, client):
        for emergency_type in VALID_PAYLOADS:
            data = create_test_request(client, emergency_type)
            assert data["emergencyType"] == emergency_type
            assert data["status"] == "pending"

    def test_ids_strictly_increase(self, client):
        ids = [create_test_request(client, t)["id"] for t in (1, 2, 3, 1)]
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)
        assert ids[0] == 1

    def test_created_at_not_before_call(self, client):
        before = datetime.now(timezone.utc) - timedelta(seconds=1)
        data = create_test_request(client)
        created_at = datetime.fromisoformat(data["createdAt"].replace("Z", "+00:00"))
        assert created_at >= before

    def test_optional_fields_default_to_null(self, client):
        data = create_test_request(client, 3)
        assert data["userId"] is None
        assert data["latitude"] is None
        assert data["longitude"] is None
        assert data["locationDescription"] is None

    def test_location_stored_as_text(self, client):
        data = create_test_request(
            client, 4,
            latitude="45.8326", longitude="6.8652", locationDescription="Mont Blanc massif",
        )
        assert data["latitude"] == "45.8326"
        assert data["longitude"] == "6.8652"
        assert data["locationDescription"] == "Mont Blanc massif"

    def test_invalid_type(self, client):
        resp = client.post("/api/emergency-requests", json={"emergencyType": 9})
        assert resp.status_code == 400
        assert error_fields(resp) == {"emergencyType"}

    def test_body_must_be_object(self, client):
        resp = client.post("/api/emergency-requests", json=[1, 2, 3])
        assert resp.status_code == 400

    def test_rejected_submission_not_stored(self, client, store):
        client.post("/api/emergency-requests", json={"emergencyType": 2})
        assert store.list_emergency_requests() == []


class TestGet:
    """GET /api/emergency-requests/{id}."""

    def test_get_request(self, client):
        created = create_test_request(client, 2)
        resp = client.get(f"/api/emergency-requests/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == created

    def test_get_unknown_id(self, client):
        resp = client.get("/api/emergency-requests/99999")
        assert resp.status_code == 404

    def test_get_non_numeric_id(self, client):
        resp = client.get("/api/emergency-requests/abc")
        assert resp.status_code == 400


class TestList:
    """GET /api/emergency-requests with filters."""

    def test_list_by_user(self, client):
        create_test_request(client, 1, userId=7)
        create_test_request(client, 3, userId=8)
        create_test_request(client, 2, userId=7)
        resp = client.get("/api/emergency-requests?userId=7")
        assert resp.status_code == 200
        assert [r["emergencyType"] for r in resp.json()] == [1, 2]

    def test_list_by_status(self, client):
        first = create_test_request(client)
        create_test_request(client)
        client.patch(f"/api/emergency-requests/{first['id']}/status", json={"status": "cancelled"})
        resp = client.get("/api/emergency-requests?status=cancelled")
        assert [r["id"] for r in resp.json()] == [first["id"]]

    def test_list_unknown_user_is_empty(self, client):
        create_test_request(client, 1, userId=7)
        resp = client.get("/api/emergency-requests?userId=42")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_list_unknown_status(self, client):
        resp = client.get("/api/emergency-requests?status=archived")
        assert resp.status_code == 400


class TestSqlBackend:
    """The same flow through the SQLAlchemy store."""

    def test_create_process_fetch(self, sql_client):
        created = create_test_request(sql_client, 1, latitude="45.83", longitude="6.86")
        assert created["id"] == 1
        assert created["status"] == "pending"

        resp = sql_client.patch(f"/api/emergency-requests/{created['id']}/status", json={"status": "processed"})
        assert resp.status_code == 200

        fetched = sql_client.get(f"/api/emergency-requests/{created['id']}").json()
        assert fetched["status"] == "processed"
        assert fetched["details"] == created["details"]
        assert fetched["createdAt"] == created["createdAt"]

    def test_get_unknown_id(self, sql_client):
        assert sql_client.get("/api/emergency-requests/99999").status_code == 404

    def test_blank_coordinates_stored_as_null(self, sql_client, notifier):
        created = create_test_request(sql_client, 3, latitude="", longitude="")
        assert created["latitude"] is None
        assert created["longitude"] is None
        assert notifier.calls == []
