"""
Tests for /api/v1/vehicles/{vehicle_id}/document-expiries.
"""

from datetime import timedelta

from app.models.document_expiry import DocumentExpiry
from app.models.notification import Notification
from tests.conftest import TODAY


def _url(vehicle_id):
    return f"/api/v1/vehicles/{vehicle_id}/document-expiries/"


class TestTrackDocumentExpiry:

    def test_track_road_tax(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)

        response = client.post(
            _url(vehicle.vehicle_id),
            json={
                "user_id": test_user.user_id,
                "document_type": "road_tax",
                "expiry_date": (TODAY + timedelta(days=45)).isoformat(),
                "amount": 2500,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Document expiry tracked successfully"
        assert body["data"]["document_type"] == "road_tax"
        assert body["data"]["issue_date"] == TODAY.isoformat()
        assert body["data"]["amount"] == 2500.0
        assert body["data"]["is_active"] is True
        assert test_db.query(Notification).count() == 1

    def test_untracked_type_is_accepted(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)

        response = client.post(
            _url(vehicle.vehicle_id),
            json={"user_id": test_user.user_id, "document_type": "service_bill", "expiry_date": "2026-12-01"},
        )

        assert response.status_code == 200
        assert response.json()["data"] is None
        assert response.json()["message"] == "Document type not tracked for expiry"
        assert test_db.query(DocumentExpiry).count() == 0

    def test_upload_without_expiry(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)

        response = client.post(
            _url(vehicle.vehicle_id), json={"user_id": test_user.user_id, "document_type": "emission"}
        )

        assert response.status_code == 200
        assert response.json()["data"] is None

    def test_upload_for_other_users_vehicle(self, client, test_db, test_user, other_user, make_vehicle):
        vehicle = make_vehicle(other_user)

        response = client.post(
            _url(vehicle.vehicle_id),
            json={"user_id": test_user.user_id, "document_type": "emission", "expiry_date": "2026-12-01"},
        )

        assert response.status_code == 404
        assert test_db.query(DocumentExpiry).count() == 0


class TestListDocumentExpiries:

    def test_active_only_by_default(self, client, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)
        for days in (10, 200):
            client.post(
                _url(vehicle.vehicle_id),
                json={
                    "user_id": test_user.user_id,
                    "document_type": "fitness_certificate",
                    "expiry_date": (TODAY + timedelta(days=days)).isoformat(),
                },
            )

        active = client.get(_url(vehicle.vehicle_id), params={"user_id": test_user.user_id})
        everything = client.get(_url(vehicle.vehicle_id), params={"user_id": test_user.user_id, "active_only": False})

        assert active.status_code == 200
        assert len(active.json()["data"]) == 1
        assert active.json()["data"][0]["expiry_date"] == (TODAY + timedelta(days=200)).isoformat()
        assert len(everything.json()["data"]) == 2

    def test_list_for_other_users_vehicle(self, client, test_user, other_user, make_vehicle):
        vehicle = make_vehicle(other_user)

        response = client.get(_url(vehicle.vehicle_id), params={"user_id": test_user.user_id})

        assert response.status_code == 404
