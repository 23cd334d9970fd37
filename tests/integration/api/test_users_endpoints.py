"""Integration tests for user endpoints."""

from tests.shared.fixtures.api import MANAGER, login


class TestBootstrap:
    def test_first_user_needs_no_token(self, test_client):
        response = test_client.post("/users", json=MANAGER)

        assert response.status_code == 201
        assert "id" in response.json()

    def test_second_anonymous_user_is_refused(self, test_client):
        test_client.post("/users", json=MANAGER)

        response = test_client.post(
            "/users",
            json={"name": "Eve", "username": "eve", "password": "x"},
        )

        assert response.status_code == 401


class TestCreateUser:
    def test_employee_cannot_create_users(self, test_client, alice_headers):
        response = test_client.post(
            "/users",
            json={"name": "Eve", "username": "eve", "password": "x"},
            headers=alice_headers,
        )

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_duplicate_username(self, test_client, manager_headers):
        response = test_client.post(
            "/users",
            json={"name": "Alice Two", "username": "alice", "password": "x"},
            headers=manager_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE_USERNAME"

    def test_missing_field(self, test_client, manager_headers):
        response = test_client.post(
            "/users",
            json={"name": "No Password", "username": "nopass"},
            headers=manager_headers,
        )

        assert response.status_code == 400

    def test_invalid_role(self, test_client, manager_headers):
        response = test_client.post(
            "/users",
            json={"name": "X", "username": "x", "password": "x", "role": "owner"},
            headers=manager_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ROLE"


class TestListUsers:
    def test_list_in_creation_order(self, test_client, alice_headers):
        response = test_client.get("/users", headers=alice_headers)

        assert response.status_code == 200
        users = response.json()
        assert [u["username"] for u in users] == ["manager", "alice", "bob"]
        assert all("password" not in u for u in users)

    def test_filter_by_role(self, test_client, manager_headers):
        response = test_client.get(
            "/users",
            params={"role": "employee"},
            headers=manager_headers,
        )

        assert [u["username"] for u in response.json()] == ["alice", "bob"]

    def test_bad_role_filter(self, test_client, manager_headers):
        response = test_client.get(
            "/users",
            params={"role": "owner"},
            headers=manager_headers,
        )

        assert response.status_code == 400

    def test_requires_token(self, test_client, team):
        assert test_client.get("/users").status_code == 401

    def test_get_user(self, test_client, team, manager_headers):
        response = test_client.get(f"/users/{team['bob']}", headers=manager_headers)

        assert response.status_code == 200
        assert response.json()["role"] == "employee"
        assert response.json()["avatarUrl"] is None

    def test_get_unknown_user(self, test_client, manager_headers):
        response = test_client.get(
            "/users/99999999-9999-9999-9999-999999999999",
            headers=manager_headers,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"


class TestUpdateUser:
    def test_manager_updates_user(self, test_client, team, manager_headers):
        response = test_client.patch(
            f"/users/{team['alice']}",
            json={"name": "Alice Smith", "password": "newpass"},
            headers=manager_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Alice Smith"
        assert response.json()["username"] == "alice"
        login(test_client, "alice", "newpass")

    def test_rename_to_taken_username(self, test_client, team, manager_headers):
        response = test_client.patch(
            f"/users/{team['alice']}",
            json={"username": "bob"},
            headers=manager_headers,
        )

        assert response.status_code == 400

    def test_employee_cannot_update(self, test_client, team, alice_headers):
        response = test_client.patch(
            f"/users/{team['alice']}",
            json={"role": "manager"},
            headers=alice_headers,
        )

        assert response.status_code == 403
