"""
Tests for login sessions on the HTTP surface
"""
import pytest

PROTECTED_ENDPOINTS = [
    ("get", "/api/clients"),
    ("post", "/api/clients"),
    ("get", "/api/services/1"),
    ("put", "/api/projects/1"),
    ("delete", "/api/documents/1"),
    ("post", "/api/contacts/1/convert"),
    ("get", "/api/followups"),
    ("get", "/api/followups/1"),
    ("put", "/api/followups/1"),
    ("delete", "/api/followups/1"),
    ("post", "/api/employees/1/clients/1"),
    ("get", "/api/analytics/dashboard"),
    ("get", "/api/analytics/reports"),
    ("get", "/api/user"),
]


@pytest.mark.api
class TestAuthentication:
    """Tests for login, logout and the session guard"""

    @pytest.mark.parametrize("method,path", PROTECTED_ENDPOINTS)
    def test_unauthenticated_requests_get_401(self, anon_client, method, path):
        response = getattr(anon_client, method)(path)
        assert response.status_code == 401

    def test_login_with_seeded_admin(self, anon_client):
        response = anon_client.post("/api/login", json={"username": "admin", "password": "password"})
        assert response.status_code == 200
        body = response.json()
        assert body["user"] == {"id": 1, "username": "admin", "employeeId": 1}
        assert body["tokenType"] == "bearer"
        assert "password" not in body["user"]

    def test_login_sets_session_cookie(self, anon_client, app_settings):
        anon_client.post("/api/login", json={"username": "admin", "password": "password"})
        assert app_settings.session_cookie_name in anon_client.cookies
        assert anon_client.get("/api/user").json()["username"] == "admin"

    def test_bearer_token(self, app, anon_client):
        from fastapi.testclient import TestClient

        token = anon_client.post(
            "/api/login", json={"username": "admin", "password": "password"}
        ).json()["accessToken"]
        fresh = TestClient(app)
        response = fresh.get("/api/clients", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_bad_credentials(self, anon_client):
        response = anon_client.post("/api/login", json={"username": "admin", "password": "nope"})
        assert response.status_code == 401
        response = anon_client.post("/api/login", json={"username": "ghost", "password": "password"})
        assert response.status_code == 401

    def test_invalid_token(self, anon_client):
        response = anon_client.get("/api/clients", headers={"Authorization": "Bearer not.a.token"})
        assert response.status_code == 401

    def test_logout_ends_only_that_session(self, app, client):
        from fastapi.testclient import TestClient

        other = TestClient(app)
        token = other.post(
            "/api/login", json={"username": "admin", "password": "password"}
        ).json()["accessToken"]
        assert client.post("/api/logout").status_code == 204
        assert client.get("/api/user").status_code == 401
        response = other.get("/api/user", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_logged_out_token_is_rejected(self, app, anon_client):
        from fastapi.testclient import TestClient

        token = anon_client.post(
            "/api/login", json={"username": "admin", "password": "password"}
        ).json()["accessToken"]
        headers = {"Authorization": f"Bearer {token}"}
        api = TestClient(app)
        assert api.post("/api/logout", headers=headers).status_code == 204
        assert api.get("/api/clients", headers=headers).status_code == 401

    def test_register_logs_in(self, anon_client):
        response = anon_client.post(
            "/api/register", json={"username": "mary", "password": "secret", "employeeId": 1}
        )
        assert response.status_code == 201
        assert response.json()["user"]["username"] == "mary"
        assert anon_client.get("/api/user").json()["id"] == 2

    def test_register_duplicate_username(self, anon_client):
        response = anon_client.post("/api/register", json={"username": "admin", "password": "x"})
        assert response.status_code == 400

    def test_register_validation(self, anon_client):
        response = anon_client.post("/api/register", json={"username": "mary"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Validation error"
