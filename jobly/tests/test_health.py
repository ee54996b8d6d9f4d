"""Tests for health check endpoints."""

from unittest.mock import MagicMock, patch


class TestHealthEndpoints:
    """Tests for health check endpoints."""

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
        """A failing database turns readiness into a 503."""
        broken = MagicMock()
        broken.execute.side_effect = Exception("Connection refused")

        with patch("jobly.db.SessionLocal", return_value=broken):
            response = client.get("/health/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["dependencies"]["database"]["status"] == "unhealthy"
        assert "Connection refused" in data["dependencies"]["database"]["error"]
        broken.close.assert_called_once()

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "Jobly API"
        assert response.json()["docs"] == "/docs"


class TestStartup:
    def test_lifespan_seeds_defaults(self):
        from fastapi.testclient import TestClient

        from jobly.main import app

        with patch("jobly.main.seed_default_data") as seed:
            with TestClient(app):
                seed.assert_called_once()

    def test_failed_seed_does_not_block_startup(self):
        from fastapi.testclient import TestClient

        from jobly.main import app

        with patch("jobly.main.seed_default_data", side_effect=RuntimeError("db down")):
            with TestClient(app) as test_client:
                assert test_client.get("/health/live").status_code == 200
