"""
Exercise group value objects produced by the grouping engine.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models.exercise import ExerciseGroupType, ExerciseInstance


class ExerciseGroup(BaseModel):
    """
    Value object representing one display/training group of exercises.

    Groups are built in a single grouping pass and never updated afterwards;
    re-grouping derives everything again from the flat exercise list.

    Examples:
        >>> # Warm-up block
        >>> group = ExerciseGroup(
        ...     type=ExerciseGroupType.WARM_UP,
        ...     exercises=[ExerciseInstance(exercise_type_id=1, preset_order=1)],
        ... )

        >>> # Superset call-out
        >>> group = ExerciseGroup(
        ...     type=ExerciseGroupType.SUPERSET,
        ...     id=9,
        ...     exercises=[
        ...         ExerciseInstance(superset_id=9, preset_order=3),
        ...         ExerciseInstance(superset_id=9, preset_order=4),
        ...     ],
        ... )
    """

    model_config = ConfigDict(frozen=True)

    type: ExerciseGroupType = Field(..., description="Group type")
    exercises: List[ExerciseInstance] = Field(
        default_factory=list, description="Exercises in this group, in order"
    )
    id: Optional[int] = Field(
        default=None, description="Superset id (superset groups only)"
    )

    @property
    def is_superset(self) -> bool:
        """Check if this group is a standalone superset."""
        return self.type == ExerciseGroupType.SUPERSET

    @property
    def is_gym_merged(self) -> bool:
        """Check if this group merges gym exercises with adjacent supersets."""
        return self.type == ExerciseGroupType.GYM_MERGED

    @property
    def first_order(self) -> Optional[int]:
        """preset_order of the first exercise, or None if empty."""
        return self.exercises[0].preset_order if self.exercises else None

    @property
    def last_order(self) -> Optional[int]:
        """preset_order of the last exercise, or None if empty."""
        return self.exercises[-1].preset_order if self.exercises else None

    def __str__(self) -> str:
        label = self.type.value
        if self.id is not None:
            label += f" {self.id}"
        orders = ", ".join(str(ex.preset_order) for ex in self.exercises)
        return f"{label} [{orders}]"


class SeparatedGymGroup(BaseModel):
    """A gym-merged group split back into plain gym exercises and supersets."""

    model_config = ConfigDict(frozen=True)

    gym_exercises: List[ExerciseInstance] = Field(default_factory=list)
    supersets: List[ExerciseGroup] = Field(default_factory=list)
