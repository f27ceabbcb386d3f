"""
Comprehensive test suite for vehicle router endpoints.

Tests cover:
1. POST /api/v1/vehicles/ - Create vehicle
2. GET /api/v1/vehicles/ - List vehicles of a user
3. GET /api/v1/vehicles/{vehicle_id} - Get single vehicle
4. PUT /api/v1/vehicles/{vehicle_id} - Update vehicle
5. DELETE /api/v1/vehicles/{vehicle_id} - Delete vehicle

Also covers:
- Ownership checks through the user_id parameter
- Validation errors (422)
- Duplicate license plates (409)
- Cascade removal of notifications and tracked documents
"""

import pytest
from datetime import date, timedelta

from app.models.document_expiry import DocumentExpiry, DocumentTypeEnum
from app.models.notification import Notification
from app.models.vehicle import Vehicle
from tests.conftest import TODAY

BASE_URL = "/api/v1/vehicles"


def _payload(user_id, **overrides):
    data = {
        "user_id": user_id,
        "make": "Hyundai",
        "model": "Creta",
        "year": 2022,
        "color": "Silver",
        "license_plate": "ka05mn4321",
        "owner_name": "Ravi Kumar",
        "owner_phone": "9000000001",
        "emission_expiry": "2026-06-30",
    }
    data.update(overrides)
    return data


# ==========================================
# Test: POST /api/v1/vehicles/
# ==========================================

class TestCreateVehicle:

    def test_create_vehicle_success(self, client, test_db, test_user):
        response = client.post(f"{BASE_URL}/", json=_payload(test_user.user_id))

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Vehicle created successfully"
        vehicle = body["data"]["vehicle"]
        assert vehicle["license_plate"] == "KA05MN4321"
        assert vehicle["emission_expiry"] == "2026-06-30"
        assert vehicle["rc_expiry"] is None
        assert test_db.query(Vehicle).count() == 1

    def test_create_vehicle_with_past_expiry(self, client, test_user):
        response = client.post(
            f"{BASE_URL}/",
            json=_payload(test_user.user_id, rc_expiry=(TODAY - timedelta(days=90)).isoformat()),
        )

        assert response.status_code == 201

    def test_create_vehicle_unknown_user(self, client):
        response = client.post(f"{BASE_URL}/", json=_payload(999))

        assert response.status_code == 404
        assert response.json()["detail"]["error_code"] == "USER_NOT_FOUND"

    def test_create_vehicle_duplicate_plate(self, client, test_user, other_user):
        client.post(f"{BASE_URL}/", json=_payload(test_user.user_id))
        response = client.post(f"{BASE_URL}/", json=_payload(other_user.user_id, license_plate="KA05MN4321"))

        assert response.status_code == 409
        assert response.json()["detail"]["error_code"] == "DUPLICATE_RESOURCE"

    @pytest.mark.parametrize("field", ["make", "model", "owner_name", "license_plate"])
    def test_create_vehicle_missing_required_field(self, client, test_user, field):
        data = _payload(test_user.user_id)
        data.pop(field)

        response = client.post(f"{BASE_URL}/", json=data)

        assert response.status_code == 422

    def test_create_vehicle_year_too_far_ahead(self, client, test_user):
        response = client.post(f"{BASE_URL}/", json=_payload(test_user.user_id, year=date.today().year + 2))

        assert response.status_code == 422

    def test_create_vehicle_bad_date(self, client, test_user):
        response = client.post(f"{BASE_URL}/", json=_payload(test_user.user_id, insurance_expiry="30/06/2026"))

        assert response.status_code == 422


# ==========================================
# Test: GET /api/v1/vehicles/
# ==========================================

class TestListVehicles:

    def test_list_only_own_vehicles(self, client, test_user, other_user, make_vehicle):
        make_vehicle(test_user)
        make_vehicle(test_user)
        make_vehicle(other_user)

        response = client.get(f"{BASE_URL}/", params={"user_id": test_user.user_id})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total"] == 2
        assert {v["user_id"] for v in data["items"]} == {test_user.user_id}

    def test_list_pagination(self, client, test_user, make_vehicle):
        for _ in range(5):
            make_vehicle(test_user)

        response = client.get(f"{BASE_URL}/", params={"user_id": test_user.user_id, "skip": 3, "limit": 10})

        data = response.json()["data"]
        assert data["total"] == 5
        assert len(data["items"]) == 2

    def test_list_empty(self, client, test_user):
        response = client.get(f"{BASE_URL}/", params={"user_id": test_user.user_id})

        assert response.json()["data"] == {"total": 0, "items": []}

    def test_list_requires_user_id(self, client):
        assert client.get(f"{BASE_URL}/").status_code == 422


# ==========================================
# Test: GET /api/v1/vehicles/{vehicle_id}
# ==========================================

class TestGetVehicle:

    def test_get_vehicle(self, client, test_user, make_vehicle):
        vehicle = make_vehicle(test_user, rc_expiry=date(2027, 1, 15))

        response = client.get(f"{BASE_URL}/{vehicle.vehicle_id}", params={"user_id": test_user.user_id})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["vehicle_id"] == vehicle.vehicle_id
        assert data["rc_expiry"] == "2027-01-15"

    def test_get_vehicle_of_other_user(self, client, test_user, other_user, make_vehicle):
        vehicle = make_vehicle(other_user)

        response = client.get(f"{BASE_URL}/{vehicle.vehicle_id}", params={"user_id": test_user.user_id})

        assert response.status_code == 404
        assert response.json()["detail"]["error_code"] == "VEHICLE_NOT_FOUND"

    def test_get_missing_vehicle(self, client, test_user):
        response = client.get(f"{BASE_URL}/12345", params={"user_id": test_user.user_id})

        assert response.status_code == 404


# ==========================================
# Test: PUT /api/v1/vehicles/{vehicle_id}
# ==========================================

class TestUpdateVehicle:

    def test_partial_update(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user, color="White")

        response = client.put(
            f"{BASE_URL}/{vehicle.vehicle_id}",
            params={"user_id": test_user.user_id},
            json={"color": "Red", "insurance_expiry": "2026-09-01"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["color"] == "Red"
        assert data["insurance_expiry"] == "2026-09-01"
        assert data["make"] == "Maruti Suzuki"

    def test_update_normalizes_plate(self, client, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)

        response = client.put(
            f"{BASE_URL}/{vehicle.vehicle_id}",
            params={"user_id": test_user.user_id},
            json={"license_plate": " dl3c9999 "},
        )

        assert response.json()["data"]["license_plate"] == "DL3C9999"

    def test_update_other_users_vehicle(self, client, test_user, other_user, make_vehicle):
        vehicle = make_vehicle(other_user)

        response = client.put(
            f"{BASE_URL}/{vehicle.vehicle_id}",
            params={"user_id": test_user.user_id},
            json={"color": "Blue"},
        )

        assert response.status_code == 404

    def test_update_to_taken_plate(self, client, test_user, make_vehicle):
        first = make_vehicle(test_user)
        second = make_vehicle(test_user)

        response = client.put(
            f"{BASE_URL}/{second.vehicle_id}",
            params={"user_id": test_user.user_id},
            json={"license_plate": first.license_plate},
        )

        assert response.status_code == 409


# ==========================================
# Test: DELETE /api/v1/vehicles/{vehicle_id}
# ==========================================

class TestDeleteVehicle:

    def test_delete_cascades(self, client, test_db, test_user, make_vehicle):
        vehicle = make_vehicle(test_user)
        test_db.add(Notification(
            vehicle_id=vehicle.vehicle_id,
            type="emission",
            title="Emission Certificate Renewal Reminder",
            message="Your vehicle's Emission Certificate expires in 3 days (2026-03-04).",
            message_key="upcoming:2026-03-04:3",
            due_date=date(2026, 3, 4),
        ))
        test_db.add(DocumentExpiry(
            vehicle_id=vehicle.vehicle_id,
            user_id=test_user.user_id,
            document_type=DocumentTypeEnum.ROAD_TAX,
            expiry_date=date(2026, 12, 31),
        ))
        test_db.commit()

        response = client.delete(f"{BASE_URL}/{vehicle.vehicle_id}", params={"user_id": test_user.user_id})

        assert response.status_code == 200
        assert response.json()["data"] is None
        assert test_db.query(Vehicle).count() == 0
        assert test_db.query(Notification).count() == 0
        assert test_db.query(DocumentExpiry).count() == 0

    def test_delete_other_users_vehicle(self, client, test_db, test_user, other_user, make_vehicle):
        vehicle = make_vehicle(other_user)

        response = client.delete(f"{BASE_URL}/{vehicle.vehicle_id}", params={"user_id": test_user.user_id})

        assert response.status_code == 404
        assert test_db.query(Vehicle).count() == 1
