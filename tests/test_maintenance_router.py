"""
Tests for the maintenance endpoints.

1. GET /api/v1/maintenance/schedule
2. GET /api/v1/maintenance/available
"""

from app.models.maintenance_schedule import MaintenanceSchedule

BASE_URL = "/api/v1/maintenance"


def test_schedule(client, test_db):
    response = client.get(
        f"{BASE_URL}/schedule", params={"make": "honda", "model": "activa 125", "year": 2022}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["make"] == "Honda"
    assert data["model"] == "ACTIVA 125"
    assert data["driving_condition"] == "normal"
    assert data["schedule"][0]["services"][0] == "Engine oil change"
    assert set(data["general_services"]) >= {"oil_change", "battery_check"}
    assert test_db.query(MaintenanceSchedule).count() == 1


def test_schedule_repeated_lookup_uses_cache(client, test_db):
    params = {"make": "Toyota", "model": "Corolla", "year": 2019, "driving_condition": "severe"}

    first = client.get(f"{BASE_URL}/schedule", params=params).json()["data"]
    second = client.get(f"{BASE_URL}/schedule", params=params).json()["data"]

    assert first["schedule_id"] == second["schedule_id"]
    assert test_db.query(MaintenanceSchedule).count() == 1


def test_schedule_unknown_vehicle(client):
    response = client.get(f"{BASE_URL}/schedule", params={"make": "Tata", "model": "Nexon", "year": 2023})

    assert response.status_code == 404
    assert response.json()["detail"]["error_code"] == "SCHEDULE_NOT_FOUND"


def test_schedule_bad_condition(client):
    response = client.get(
        f"{BASE_URL}/schedule",
        params={"make": "Honda", "model": "Activa", "year": 2022, "driving_condition": "offroad"},
    )

    assert response.status_code == 422


def test_schedule_requires_year(client):
    response = client.get(f"{BASE_URL}/schedule", params={"make": "Honda", "model": "Activa"})

    assert response.status_code == 422


def test_available(client):
    response = client.get(f"{BASE_URL}/available")

    assert response.status_code == 200
    makes = {entry["make"]: entry["models"] for entry in response.json()["data"]}
    assert "ACTIVA" in makes["Honda"]
    assert "PRIUS" in makes["Toyota"]
