"""
Tests for the document metadata endpoints.

1. POST /api/v1/vehicles/{vehicle_id}/documents - record an upload
2. GET /api/v1/vehicles/{vehicle_id}/documents
3. DELETE /api/v1/documents/{document_id}
"""

from datetime import timedelta

from app.models.document import Document
from app.models.document_expiry import DocumentExpiry
from app.models.notification import Notification
from tests.conftest import TODAY

BASE_URL = "/api/v1"


def _payload(user_id, **overrides):
    data = {
        "user_id": user_id,
        "type": "rc",
        "file_name": "rc_front.jpg",
        "file_path": "vehicles/1/rc_front.jpg",
        "file_size": 204800,
        "mime_type": "image/jpeg",
    }
    data.update(overrides)
    return data


class TestCreateDocument:

    def test_record_upload(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)

        response = client.post(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents", json=_payload(test_user.user_id)
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["document"]["vehicle_id"] == vehicle.vehicle_id
        assert data["document"]["file_name"] == "rc_front.jpg"
        assert data["document_expiry"] is None
        assert test_db.query(Document).count() == 1
        assert test_db.query(DocumentExpiry).count() == 0

    def test_upload_with_expiry_is_tracked(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)
        expiry = TODAY + timedelta(days=3)

        response = client.post(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents",
            json=_payload(test_user.user_id, type="road_tax", expiry_date=expiry.isoformat(), amount=1500),
        )

        assert response.status_code == 201
        tracked = response.json()["data"]["document_expiry"]
        assert tracked["document_type"] == "road_tax"
        assert tracked["expiry_date"] == expiry.isoformat()
        assert tracked["reminder_sent"] is True
        assert test_db.query(Notification).filter(Notification.type == "road_tax").count() == 1

    def test_untracked_type_with_expiry(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)

        response = client.post(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents",
            json=_payload(test_user.user_id, type="service_bill", expiry_date="2026-12-01"),
        )

        assert response.status_code == 201
        assert response.json()["data"]["document_expiry"] is None
        assert test_db.query(Document).count() == 1

    def test_upload_for_other_users_vehicle(self, client, test_db, test_user, other_user, make_vehicle):
        vehicle = make_vehicle(other_user)

        response = client.post(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents", json=_payload(test_user.user_id)
        )

        assert response.status_code == 404
        assert test_db.query(Document).count() == 0

    def test_negative_file_size(self, client, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)

        response = client.post(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents", json=_payload(test_user.user_id, file_size=-1)
        )

        assert response.status_code == 422


class TestListDocuments:

    def test_list_newest_first(self, client, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)
        for name in ("first.pdf", "second.pdf"):
            client.post(
                f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents",
                json=_payload(test_user.user_id, file_name=name, mime_type="application/pdf"),
            )

        response = client.get(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents", params={"user_id": test_user.user_id}
        )

        assert response.status_code == 200
        assert [d["file_name"] for d in response.json()["data"]] == ["second.pdf", "first.pdf"]

    def test_list_only_that_vehicle(self, client, test_user, make_vehicle):
        first = make_vehicle(test_user)
        second = make_vehicle(test_user)
        client.post(f"{BASE_URL}/vehicles/{first.vehicle_id}/documents", json=_payload(test_user.user_id))

        response = client.get(
            f"{BASE_URL}/vehicles/{second.vehicle_id}/documents", params={"user_id": test_user.user_id}
        )

        assert response.json()["data"] == []

    def test_list_for_other_users_vehicle(self, client, test_user, other_user, make_vehicle):
        vehicle = make_vehicle(other_user)

        response = client.get(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents", params={"user_id": test_user.user_id}
        )

        assert response.status_code == 404


class TestDeleteDocument:

    def test_delete_document(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)
        created = client.post(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents", json=_payload(test_user.user_id)
        ).json()["data"]["document"]

        response = client.delete(
            f"{BASE_URL}/documents/{created['document_id']}", params={"user_id": test_user.user_id}
        )

        assert response.status_code == 200
        assert response.json()["data"] is None
        assert test_db.query(Document).count() == 0

    def test_delete_other_users_document(self, client, test_db, test_user, other_user, make_vehicle):
        vehicle = make_vehicle(other_user)
        created = client.post(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents", json=_payload(other_user.user_id)
        ).json()["data"]["document"]

        response = client.delete(
            f"{BASE_URL}/documents/{created['document_id']}", params={"user_id": test_user.user_id}
        )

        assert response.status_code == 404
        assert response.json()["detail"]["error_code"] == "DOCUMENT_NOT_FOUND"
        assert test_db.query(Document).count() == 1

    def test_documents_removed_with_vehicle(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)
        client.post(f"{BASE_URL}/vehicles/{vehicle.vehicle_id}/documents", json=_payload(test_user.user_id))

        response = client.delete(
            f"{BASE_URL}/vehicles/{vehicle.vehicle_id}", params={"user_id": test_user.user_id}
        )

        assert response.status_code == 200
        assert test_db.query(Document).count() == 0
