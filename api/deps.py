"""
FastAPI Dependency Providers for the Planner API.

The grouping engine and progression generator are pure functions with no
repositories or clients to inject, so the only shared dependency is the
settings object that carries request limits and defaults.

Usage in routers:
    from api.deps import get_settings

    @router.post("/template")
    def generate(settings: Settings = Depends(get_settings)):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None, ...)
"""

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()
