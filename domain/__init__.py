"""
Domain layer for the planner.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ExerciseGroup,
    ExerciseGroupType,
    ExerciseInstance,
    ExerciseTypeId,
    ProgressionModel,
    ProgressionOptions,
    ProgressionWeek,
    SeparatedGymGroup,
)

__all__ = [
    "ExerciseGroup",
    "ExerciseGroupType",
    "ExerciseInstance",
    "ExerciseTypeId",
    "ProgressionModel",
    "ProgressionOptions",
    "ProgressionWeek",
    "SeparatedGymGroup",
]
