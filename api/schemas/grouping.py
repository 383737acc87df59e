"""
Grouping Schemas for the exercise grouping API.

Schemas for:
- GroupExercisesRequest / GroupExercisesResponse: POST /grouping/groups
- SeparateGroupRequest: POST /grouping/separate
"""

from typing import List

from pydantic import BaseModel, Field

from domain.models import ExerciseGroup, ExerciseInstance


class GroupExercisesRequest(BaseModel):
    """Request body for POST /grouping/groups."""
    exercises: List[ExerciseInstance] = Field(
        default_factory=list,
        description="Session exercises in any order (snake_case or camelCase keys)",
    )
    separate_supersets: bool = Field(
        default=False,
        description="Render supersets as their own groups instead of inside gymMerged groups",
    )


class GroupExercisesResponse(BaseModel):
    """Response body for POST /grouping/groups."""
    groups: List[ExerciseGroup]
    total_exercises: int
    group_count: int


class SeparateGroupRequest(BaseModel):
    """Request body for POST /grouping/separate."""
    group: ExerciseGroup = Field(
        ...,
        description="A gymMerged group to split into gym exercises and supersets",
    )
