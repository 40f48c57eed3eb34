"""
Integration tests for registration and login flows.

Tests the full flows through the API with a real database.
Skipped when the configured database is not reachable.
"""

import logging

import pytest
from fastapi.testclient import TestClient
from psycopg_pool import ConnectionPool

from src.api.main import app

pytestmark = [pytest.mark.integration, pytest.mark.usefixtures("clean_database")]

REGISTRATION = {
    "name": "Jo",
    "userName": "jo_1",
    "email": "A@B.com",
    "password": "Abcdefg1",
}


@pytest.fixture
def client(pool: ConnectionPool) -> TestClient:
    """Create test client with real database connection."""
    app.state.pool = pool
    return TestClient(app)


class TestRegisterFlow:
    """Integration tests for POST /v1/register."""

    def test_register_stores_normalized_identity_and_hash(
        self, client: TestClient, pool: ConnectionPool
    ) -> None:
        response = client.post("/v1/register", json=REGISTRATION)

        assert response.status_code == 201
        with pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT email, user_name, role, password_hash FROM users")
            email, user_name, role, password_hash = cursor.fetchone()

        assert email == "a@b.com"
        assert user_name == "jo_1"
        assert role == "applicant"
        assert password_hash.startswith("$argon2id$")

    def test_second_registration_same_email_rejected(self, client: TestClient) -> None:
        client.post("/v1/register", json=REGISTRATION)
        response = client.post("/v1/register", json={**REGISTRATION, "userName": "other", "email": "a@b.COM"})

        assert response.status_code == 409
        assert response.json()["message"] == "Email Already Exists"

    def test_second_registration_same_user_name_rejected(self, client: TestClient) -> None:
        client.post("/v1/register", json=REGISTRATION)
        response = client.post("/v1/register", json={**REGISTRATION, "email": "c@d.com"})

        assert response.status_code == 409
        assert response.json()["message"] == "Username Already Exists"


class TestLoginFlow:
    """Integration tests for POST /v1/login."""

    def test_register_then_login(self, client: TestClient) -> None:
        client.post("/v1/register", json=REGISTRATION)

        response = client.post("/v1/login", json={"email": " a@B.com", "password": "Abcdefg1"})

        assert response.status_code == 200
        assert response.json() == {"status": "SUCCESS", "message": "Login Successful"}

    def test_plaintext_stored_password_rejected_without_crash(
        self, client: TestClient, pool: ConnectionPool, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A legacy row holding a plaintext password yields the generic failure."""
        with pool.connection() as conn:
            conn.execute(
                "INSERT INTO users (name, user_name, email, password_hash) "
                "VALUES ('Legacy', 'legacy', 'legacy@example.com', 'Abcdefg1')"
            )
            conn.commit()

        with caplog.at_level(logging.WARNING):
            response = client.post(
                "/v1/login", json={"email": "legacy@example.com", "password": "Abcdefg1"}
            )

        assert response.status_code == 401
        assert response.json() == {"status": "ERROR", "message": "Invalid email or password"}
        assert any("[MALFORMED_SECRET]" in r.getMessage() for r in caplog.records)
