BASE_URL = "/api/v1/users"


class TestUserRouter:

    def test_create_user(self, client):
        response = client.post(f"{BASE_URL}/", json={"username": "8888888888", "mobile": "8888888888"})

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["username"] == "8888888888"
        assert data["is_verified"] is False

    def test_create_duplicate_username(self, client, test_user):
        response = client.post(f"{BASE_URL}/", json={"username": test_user.username})

        assert response.status_code == 409
        assert response.json()["detail"]["error_code"] == "USER_EXISTS"

    def test_get_user(self, client, test_user):
        response = client.get(f"{BASE_URL}/{test_user.user_id}")

        assert response.status_code == 200
        assert response.json()["data"]["user_id"] == test_user.user_id

    def test_get_missing_user(self, client):
        response = client.get(f"{BASE_URL}/424242")

        assert response.status_code == 404
        assert response.json()["detail"]["error_code"] == "USER_NOT_FOUND"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
