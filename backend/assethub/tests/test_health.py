"""Tests for health check endpoints."""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError


class TestHealthEndpoints:
    def test_health_basic(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_health_live(self, client):
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_health_ready(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["dependencies"]["database"]["status"] == "healthy"

    def test_health_ready_database_down(self, client):
        with patch("assethub.main.SessionLocal") as session_factory:
            session_factory.return_value.execute.side_effect = OperationalError(
                "SELECT 1", {}, Exception("connection refused")
            )

            response = client.get("/health/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["dependencies"]["database"]["status"] == "unhealthy"

    def test_root(self, client):
        data = client.get("/").json()

        assert data["message"] == "AssetHub Management API"
        assert data["docs"] == "/docs"
