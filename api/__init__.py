"""
API package for the Planner API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request/response models
"""

# Re-export dependency providers for convenient access
from api.deps import get_settings

__all__ = [
    # Settings
    "get_settings",
]
