"""
Exercise instance value object for session exercise lists.

An ExerciseInstance is one prescribed exercise within a training session.
The surrounding application ships these in both snake_case and camelCase
(and sometimes nests the type id under an ``exercise`` relation), so this
model is the single boundary where field names are normalized.

Field mapping accepted on input:
    exercise_type_id  <- exercise_type_id | exerciseTypeId | exercise.exercise_type_id
    superset_id       <- superset_id | supersetId
    preset_order      <- preset_order | presetOrder | position
"""

from enum import Enum, IntEnum
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class ExerciseTypeId(IntEnum):
    """Exercise type codes as stored by the plan builder."""

    WARM_UP = 1
    GYM = 2
    CIRCUIT = 3
    ISOMETRIC = 4
    PLYOMETRIC = 5
    SPRINT = 6
    DRILL = 7


class ExerciseGroupType(str, Enum):
    """
    Display group types produced by the grouping engine.

    The first eight mirror exercise types (with OTHER as the fallback for
    unknown codes). GYM_MERGED and SUPERSET are produced by grouping only.
    """

    WARM_UP = "warm up"
    GYM = "gym"
    CIRCUIT = "circuit"
    ISOMETRIC = "isometric"
    PLYOMETRIC = "plyometric"
    SPRINT = "sprint"
    DRILL = "drill"
    OTHER = "other"
    GYM_MERGED = "gymMerged"
    SUPERSET = "superset"


_TYPE_ID_TO_GROUP_TYPE = {
    ExerciseTypeId.WARM_UP: ExerciseGroupType.WARM_UP,
    ExerciseTypeId.GYM: ExerciseGroupType.GYM,
    ExerciseTypeId.CIRCUIT: ExerciseGroupType.CIRCUIT,
    ExerciseTypeId.ISOMETRIC: ExerciseGroupType.ISOMETRIC,
    ExerciseTypeId.PLYOMETRIC: ExerciseGroupType.PLYOMETRIC,
    ExerciseTypeId.SPRINT: ExerciseGroupType.SPRINT,
    ExerciseTypeId.DRILL: ExerciseGroupType.DRILL,
}


def get_exercise_group_type(exercise_type_id: Optional[int]) -> ExerciseGroupType:
    """
    Map an exercise type code to its group type.

    Args:
        exercise_type_id: Type code from the database (may be None)

    Returns:
        The matching ExerciseGroupType, or OTHER for anything unmapped.
    """
    try:
        return _TYPE_ID_TO_GROUP_TYPE[ExerciseTypeId(exercise_type_id)]
    except (ValueError, TypeError, KeyError):
        return ExerciseGroupType.OTHER


class ExerciseInstance(BaseModel):
    """
    Value object representing one prescribed exercise in a session.

    Only ``preset_order`` is required. Unknown fields (names, sets, notes...)
    are kept as extras so callers get their data back untouched.

    Examples:
        >>> ex = ExerciseInstance(id=1, exerciseTypeId=2, presetOrder=1)
        >>> ex.group_type
        <ExerciseGroupType.GYM: 'gym'>

        >>> ex = ExerciseInstance(
        ...     id=2,
        ...     exercise={"exercise_type_id": 2},
        ...     superset_id=9,
        ...     preset_order=3,
        ... )
        >>> ex.in_superset
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )

    id: Optional[Union[int, str]] = Field(
        default=None, description="Passthrough identifier (unused by grouping)"
    )
    exercise_type_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("exercise_type_id", "exerciseTypeId"),
        description="Exercise type code (1=warm up ... 7=drill)",
    )
    preset_order: int = Field(
        ...,
        validation_alias=AliasChoices("preset_order", "presetOrder", "position"),
        description="Session-relative ordering key",
    )
    superset_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("superset_id", "supersetId"),
        description="Shared id for exercises performed as one superset",
    )

    @model_validator(mode="before")
    @classmethod
    def lift_nested_exercise_type(cls, data: Any) -> Any:
        """Pull the type id up from a nested ``exercise`` relation if needed."""
        if not isinstance(data, dict):
            return data
        if "exercise_type_id" in data or "exerciseTypeId" in data:
            return data

        nested = data.get("exercise")
        if isinstance(nested, dict):
            type_id = nested.get("exercise_type_id", nested.get("exerciseTypeId"))
            if type_id is not None:
                data = {**data, "exercise_type_id": type_id}
        return data

    @property
    def group_type(self) -> ExerciseGroupType:
        """Group type derived from the exercise type code."""
        return get_exercise_group_type(self.exercise_type_id)

    @property
    def in_superset(self) -> bool:
        """True if this exercise belongs to a superset."""
        return self.superset_id is not None

    def __str__(self) -> str:
        parts = [f"#{self.preset_order}", self.group_type.value]
        if self.in_superset:
            parts.append(f"(superset {self.superset_id})")
        return " ".join(parts)
