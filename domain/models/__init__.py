"""
Domain models for the planner.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core planning concepts:
- ExerciseInstance: One prescribed exercise within a session
- ExerciseGroup: A display/training group produced by exercise grouping
- ProgressionWeek: One week of a progression template
- ProgressionOptions: Tuning options for the progression models

Usage:
    >>> from domain.models import ExerciseInstance, ExerciseGroup

    >>> exercise = ExerciseInstance(exerciseTypeId=2, presetOrder=1)

    >>> # Serialize to JSON
    >>> json_str = exercise.model_dump_json()
"""

from domain.models.exercise import (
    ExerciseGroupType,
    ExerciseInstance,
    ExerciseTypeId,
    get_exercise_group_type,
)
from domain.models.exercise_group import ExerciseGroup, SeparatedGymGroup
from domain.models.progression import (
    PROGRESSION_MODEL_CATALOG,
    EffectiveWeek,
    ProgressionModel,
    ProgressionModelInfo,
    ProgressionOptions,
    ProgressionWeek,
    get_model_name,
)

__all__ = [
    # Exercises and groups
    "ExerciseInstance",
    "ExerciseGroup",
    "SeparatedGymGroup",
    # Progression
    "ProgressionOptions",
    "ProgressionWeek",
    "EffectiveWeek",
    "ProgressionModelInfo",
    "PROGRESSION_MODEL_CATALOG",
    # Enums
    "ExerciseTypeId",
    "ExerciseGroupType",
    "ProgressionModel",
    # Helpers
    "get_exercise_group_type",
    "get_model_name",
]
