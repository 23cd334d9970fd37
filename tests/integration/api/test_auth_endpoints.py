"""Integration tests for authentication endpoints."""

from tests.shared.fixtures.api import login


class TestLogin:
    def test_login_success(self, test_client, team):
        response = test_client.post(
            "/auth/login",
            json={"username": "manager", "password": "p"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["tokenType"] == "bearer"
        assert data["expiresIn"] == 12 * 3600
        assert data["user"]["id"] == team["manager"]
        assert data["user"]["role"] == "manager"
        assert "password" not in data["user"]

    def test_wrong_password(self, test_client, team):
        response = test_client.post(
            "/auth/login",
            json={"username": "manager", "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"
        assert "user" not in response.json()
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unknown_user_looks_like_wrong_password(self, test_client, team):
        response = test_client.post(
            "/auth/login",
            json={"username": "nobody", "password": "p"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_missing_fields(self, test_client):
        response = test_client.post("/auth/login", json={"username": "manager"})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_empty_fields_are_missing_fields(self, test_client, team):
        response = test_client.post(
            "/auth/login",
            json={"username": "", "password": ""},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_empty_password(self, test_client, team):
        response = test_client.post(
            "/auth/login",
            json={"username": "manager", "password": ""},
        )

        assert response.status_code == 400


class TestMe:
    def test_me_returns_token_user(self, test_client, team):
        headers = login(test_client, "alice", "alice123")

        response = test_client.get("/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "alice"

    def test_me_requires_token(self, test_client):
        response = test_client.get("/auth/me")

        assert response.status_code == 401

    def test_me_rejects_garbage_token(self, test_client):
        response = test_client.get(
            "/auth/me",
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401


class TestHealth:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestOpenAPI:
    def test_error_responses_document_error_schema(self, test_client):
        schema = test_client.get("/openapi.json").json()

        assert "ErrorResponse" in schema["components"]["schemas"]
        login_401 = schema["paths"]["/auth/login"]["post"]["responses"]["401"]
        assert login_401["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse",
        }
