"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- grouping: Exercise grouping request/response models
- progression: Progression template request/response models
"""

from api.schemas.grouping import (
    GroupExercisesRequest,
    GroupExercisesResponse,
    SeparateGroupRequest,
)
from api.schemas.progression import (
    ProgressionModelResponse,
    ProgressionTemplateRequest,
    ProgressionTemplateResponse,
)

__all__ = [
    "GroupExercisesRequest",
    "GroupExercisesResponse",
    "SeparateGroupRequest",
    "ProgressionModelResponse",
    "ProgressionTemplateRequest",
    "ProgressionTemplateResponse",
]
