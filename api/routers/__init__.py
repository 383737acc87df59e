"""
Router package for the Planner API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- grouping: Exercise grouping for session rendering
- progression: Progression models and weekly templates
"""

from api.routers.health import router as health_router
from api.routers.grouping import router as grouping_router
from api.routers.progression import router as progression_router

__all__ = [
    "health_router",
    "grouping_router",
    "progression_router",
]
