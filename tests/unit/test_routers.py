"""
Unit tests for api/routers.

Tests that routers are correctly configured and wired into the application.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.settings import Settings


class TestRouterInclusion:
    """Test that all routers are correctly included in the app."""

    @pytest.fixture
    def test_app(self):
        """Create a test app with routers."""
        settings = Settings(environment="test", _env_file=None)
        return create_app(settings=settings)

    @pytest.fixture
    def client(self, test_app):
        """Create a test client for the app."""
        return TestClient(test_app)

    def test_health_endpoint_accessible(self, client):
        """Health endpoint should be accessible via router."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_openapi_health_endpoint_has_tag(self, test_app):
        """OpenAPI schema should show Health tag on health endpoint."""
        openapi = test_app.openapi()
        paths = openapi.get("paths", {})
        health_get = paths.get("/health", {}).get("get", {})
        assert "Health" in health_get.get("tags", [])

    def test_openapi_domain_tags(self, test_app):
        """Grouping and progression endpoints should carry their router tags."""
        paths = test_app.openapi()["paths"]
        assert "Grouping" in paths["/grouping/groups"]["post"]["tags"]
        assert "Grouping" in paths["/grouping/separate"]["post"]["tags"]
        assert "Progression" in paths["/progression/models"]["get"]["tags"]
        assert "Progression" in paths["/progression/template"]["post"]["tags"]

    def test_openapi_schema_generated(self, test_app):
        """OpenAPI schema should be generated without errors."""
        openapi = test_app.openapi()
        assert "openapi" in openapi
        assert "info" in openapi
        assert "paths" in openapi
        assert "/health" in openapi["paths"]


class TestHealthRouter:
    """Test health router endpoints."""

    @pytest.fixture
    def client(self):
        """Create a test client."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        return TestClient(app)

    def test_health_returns_ok_status(self, client):
        """Health endpoint should return status ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health_returns_json(self, client):
        """Health endpoint should return JSON content type."""
        response = client.get("/health")
        assert "application/json" in response.headers["content-type"]

    def test_health_method_not_allowed(self, client):
        """Health endpoint should only accept GET."""
        response = client.post("/health")
        assert response.status_code == 405
