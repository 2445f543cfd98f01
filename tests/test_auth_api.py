"""Tests for the mock authentication endpoints."""
import pytest

from courts_finder.services.auth_service import DEMO_EMAIL, DEMO_PASSWORD, DEMO_TOKEN


class TestLogin:
    def test_demo_account(self, client):
        response = client.post(
            "/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["token"] == DEMO_TOKEN
        assert data["user"]["email"] == DEMO_EMAIL
        assert data["user"]["name"] == "Demo User"

    def test_wrong_password(self, client):
        response = client.post(
            "/auth/login", json={"email": DEMO_EMAIL, "password": "nope123"}
        )
        assert response.status_code == 401
        assert response.json()["detail"]["message"] == "Invalid credentials"

    @pytest.mark.parametrize("body", [
        {"email": DEMO_EMAIL},
        {"password": DEMO_PASSWORD},
        {"email": "", "password": ""},
    ])
    def test_missing_credentials(self, client, body):
        response = client.post("/auth/login", json=body)
        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Email and password are required"

    def test_info(self, client):
        data = client.get("/auth/login").json()
        assert data["requiredFields"] == ["email", "password"]
        assert data["demoCredentials"]["email"] == DEMO_EMAIL


class TestRegister:
    def test_register(self, client):
        response = client.post(
            "/auth/register",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret1"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["user"]["name"] == "Ada"
        assert data["user"]["createdAt"]
        assert data["token"] == f"mock-jwt-token-{data['user']['id']}"

    def test_missing_name(self, client):
        response = client.post(
            "/auth/register", json={"email": "ada@example.com", "password": "secret1"}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Name, email and password are required"

    @pytest.mark.parametrize("email", ["ada", "ada@example", "ada @example.com"])
    def test_invalid_email(self, client, email):
        response = client.post(
            "/auth/register", json={"name": "Ada", "email": email, "password": "secret1"}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Invalid email format"

    def test_short_password(self, client):
        response = client.post(
            "/auth/register",
            json={"name": "Ada", "email": "ada@example.com", "password": "12345"},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Password must be at least 6 characters"

    def test_info(self, client):
        data = client.get("/auth/register").json()
        assert data["requiredFields"] == ["name", "email", "password"]
