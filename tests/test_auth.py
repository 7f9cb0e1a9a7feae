"""
Tests for authentication and user endpoints.

Tests:
- Login
- Registration
- Current user profile
- Admin-or-self access to user profiles
"""

from jobly.core.security import decode_token, verify_password
from jobly.core.database import run_query


class TestLogin:

    def test_login_success(self, client, users):
        response = client.post("/api/v1/auth/token", json={"username": "u1", "password": "password1"})

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        payload = decode_token(data["access_token"])
        assert payload["username"] == "u1"
        assert payload["isAdmin"] is False

    def test_admin_login_carries_admin_flag(self, client, users):
        response = client.post("/api/v1/auth/token", json={"username": "admin", "password": "password1"})

        assert decode_token(response.json()["access_token"])["isAdmin"] is True

    def test_wrong_password(self, client, users):
        response = client.post("/api/v1/auth/token", json={"username": "u1", "password": "nope"})

        assert response.status_code == 401

    def test_unknown_user(self, client, users):
        response = client.post("/api/v1/auth/token", json={"username": "ghost", "password": "password1"})

        assert response.status_code == 401

    def test_missing_password(self, client, users):
        response = client.post("/api/v1/auth/token", json={"username": "u1"})

        assert response.status_code == 400


class TestRegistration:

    new_user = {
        "username": "new",
        "password": "password",
        "firstName": "first",
        "lastName": "last",
        "email": "new@email.com",
    }

    def test_register(self, client, db_session, users):
        response = client.post("/api/v1/auth/register", json=self.new_user)

        assert response.status_code == 201
        payload = decode_token(response.json()["access_token"])
        assert payload["username"] == "new"
        assert payload["isAdmin"] is False

        row = run_query(db_session, "SELECT password FROM users WHERE username = $1", ["new"]).first()
        assert row.password != "password"
        assert verify_password("password", row.password)

    def test_register_cannot_make_admin(self, client, users):
        response = client.post("/api/v1/auth/register", json={**self.new_user, "isAdmin": True})

        assert response.status_code == 400

    def test_register_duplicate(self, client, users):
        response = client.post("/api/v1/auth/register", json={**self.new_user, "username": "u1"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Duplicate username: u1"

    def test_register_bad_email(self, client, users):
        response = client.post("/api/v1/auth/register", json={**self.new_user, "email": "not-an-email"})

        assert response.status_code == 400


class TestCurrentUser:

    def test_me(self, client, users, u1_headers):
        response = client.get("/api/v1/auth/me", headers=u1_headers)

        assert response.status_code == 200
        assert response.json() == {
            "user": {
                "username": "u1",
                "firstName": "U1F",
                "lastName": "U1L",
                "email": "user1@user.com",
                "isAdmin": False,
            }
        }

    def test_me_anon(self, client, users):
        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401


class TestUsers:

    def test_list_users_as_admin(self, client, users, admin_headers):
        response = client.get("/api/v1/users/", headers=admin_headers)

        assert response.status_code == 200
        assert [u["username"] for u in response.json()["users"]] == ["admin", "u1"]
        assert all("password" not in u for u in response.json()["users"])

    def test_list_users_non_admin(self, client, users, u1_headers):
        response = client.get("/api/v1/users/", headers=u1_headers)

        assert response.status_code == 401

    def test_get_self(self, client, users, u1_headers):
        response = client.get("/api/v1/users/u1", headers=u1_headers)

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "u1"

    def test_get_other_as_admin(self, client, users, admin_headers):
        response = client.get("/api/v1/users/u1", headers=admin_headers)

        assert response.status_code == 200

    def test_get_other_as_non_admin(self, client, users, u1_headers):
        response = client.get("/api/v1/users/admin", headers=u1_headers)

        assert response.status_code == 401

    def test_get_anon(self, client, users):
        response = client.get("/api/v1/users/u1")

        assert response.status_code == 401

    def test_get_nonexistent_as_admin(self, client, users, admin_headers):
        response = client.get("/api/v1/users/ghost", headers=admin_headers)

        assert response.status_code == 404
