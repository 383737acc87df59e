"""
Unit tests for api/deps.py dependency providers.

These tests verify that the dependency providers are properly wired and
return the correct types.
"""

import pytest

# All tests in this module are pure logic tests - mark as unit
pytestmark = pytest.mark.unit


# =============================================================================
# Import Tests
# =============================================================================


class TestDepsImports:
    """Test that all dependency providers can be imported."""

    def test_import_get_settings(self):
        """get_settings should be importable from api.deps."""
        from api.deps import get_settings
        assert get_settings is not None

    def test_import_from_api_package(self):
        """Providers should be re-exported from the api package."""
        from api import get_settings
        from api.deps import get_settings as deps_get_settings
        assert get_settings is deps_get_settings


# =============================================================================
# Settings Provider Tests
# =============================================================================


class TestSettingsProvider:
    """Test get_settings provider."""

    def test_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        from api.deps import get_settings
        from backend.settings import Settings

        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_is_cached(self):
        """get_settings should return the same cached instance."""
        from api.deps import get_settings

        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
