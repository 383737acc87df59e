"""
Exercise grouping engine.

Organizes a session's flat exercise list into display/training groups:

1. Sort by preset_order (stable, equal keys keep their relative order)
2. Partition into runs of same-type exercises and runs of one superset
3. Merge gym runs with adjacent supersets into "gymMerged" groups

Every function here is pure. Input exercises are never mutated and the same
input always yields the same groups, so callers may memoize freely.
"""

import logging
from functools import reduce
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from domain.models.exercise import ExerciseGroupType, ExerciseInstance
from domain.models.exercise_group import ExerciseGroup, SeparatedGymGroup

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================


def _preset_order(exercise: ExerciseInstance) -> int:
    return exercise.preset_order


def sort_exercises(exercises: Iterable[ExerciseInstance]) -> List[ExerciseInstance]:
    """
    Return a new list ordered ascending by preset_order.

    Superset members frequently share a preset_order, so the sort must be
    stable (Python's sorted() is).
    """
    return sorted(exercises, key=_preset_order)


def _with_appended(
    group: ExerciseGroup, exercises: Sequence[ExerciseInstance]
) -> ExerciseGroup:
    return group.model_copy(update={"exercises": [*group.exercises, *exercises]})


def _replace_last(
    groups: Tuple[ExerciseGroup, ...], group: ExerciseGroup
) -> Tuple[ExerciseGroup, ...]:
    return groups[:-1] + (group,)


# =============================================================================
# Stage 2: Partition by type / superset
# =============================================================================


class _PartitionState(NamedTuple):
    """
    Walk state for the type/superset partition.

    At most one of the two "current" groups is set, and whichever is set is
    always the last entry of ``groups``.
    """

    groups: Tuple[ExerciseGroup, ...] = ()
    current_type_group: Optional[ExerciseGroup] = None
    current_superset_group: Optional[ExerciseGroup] = None


def _partition_step(state: _PartitionState, exercise: ExerciseInstance) -> _PartitionState:
    if exercise.superset_id is not None:
        current = state.current_superset_group
        if current is not None and current.id == exercise.superset_id:
            superset = _with_appended(current, [exercise])
            groups = _replace_last(state.groups, superset)
        else:
            superset = ExerciseGroup(
                type=ExerciseGroupType.SUPERSET,
                id=exercise.superset_id,
                exercises=[exercise],
            )
            groups = state.groups + (superset,)
        return _PartitionState(groups, None, superset)

    group_type = exercise.group_type
    current = state.current_type_group
    if current is not None and current.type == group_type:
        type_group = _with_appended(current, [exercise])
        groups = _replace_last(state.groups, type_group)
    else:
        type_group = ExerciseGroup(type=group_type, exercises=[exercise])
        groups = state.groups + (type_group,)
    return _PartitionState(groups, type_group, None)


def group_exercises_by_type(
    sorted_exercises: Iterable[ExerciseInstance],
) -> List[ExerciseGroup]:
    """
    Group exercises by type while preserving order.

    Consecutive non-superset exercises of the same type share a group, and
    consecutive exercises of the same superset share a group. A different
    superset id or a type change always starts a new group, even when the
    new group is of a kind seen just before.

    Args:
        sorted_exercises: Exercises already sorted by preset_order

    Returns:
        List of type groups and superset groups in session order
    """
    state = reduce(_partition_step, sorted_exercises, _PartitionState())
    return list(state.groups)


# =============================================================================
# Stage 3: Merge gym groups with adjacent supersets
# =============================================================================


class _MergeState(NamedTuple):
    """
    Walk state for the gym/superset merge.

    When ``current_gym_group`` is set it is the last entry of ``final_groups``.
    """

    final_groups: Tuple[ExerciseGroup, ...] = ()
    current_gym_group: Optional[ExerciseGroup] = None


def _is_adjacent_to_gym(
    groups: Sequence[ExerciseGroup],
    index: int,
    current_gym_group: Optional[ExerciseGroup],
) -> bool:
    """
    Decide whether the superset at ``index`` belongs with gym content.

    True if the previous or next group is a gym group, or if a gym-merged
    group is open and its last preset_order differs from the superset's
    first preset_order by exactly 1.
    """
    superset = groups[index]

    if index > 0 and groups[index - 1].type == ExerciseGroupType.GYM:
        return True
    if index + 1 < len(groups) and groups[index + 1].type == ExerciseGroupType.GYM:
        return True

    if current_gym_group is None or not current_gym_group.exercises:
        return False
    if not superset.exercises:
        return False
    return abs(current_gym_group.last_order - superset.first_order) == 1


def _insert_by_order(
    gym_exercises: Sequence[ExerciseInstance],
    superset_exercises: Sequence[ExerciseInstance],
) -> List[ExerciseInstance]:
    """Splice a superset in before the first gym exercise ordered after it."""
    if not superset_exercises:
        return list(gym_exercises)

    first_order = superset_exercises[0].preset_order
    insert_at = next(
        (i for i, ex in enumerate(gym_exercises) if ex.preset_order > first_order),
        len(gym_exercises),
    )
    return [*gym_exercises[:insert_at], *superset_exercises, *gym_exercises[insert_at:]]


def _open_gym_merged(exercises: Sequence[ExerciseInstance]) -> ExerciseGroup:
    return ExerciseGroup(type=ExerciseGroupType.GYM_MERGED, exercises=list(exercises))


def _merge_step(
    groups: Sequence[ExerciseGroup], state: _MergeState, index: int
) -> _MergeState:
    group = groups[index]
    current = state.current_gym_group

    if group.type == ExerciseGroupType.GYM:
        if current is not None:
            merged = _with_appended(current, group.exercises)
            return _MergeState(_replace_last(state.final_groups, merged), merged)
        merged = _open_gym_merged(group.exercises)
        return _MergeState(state.final_groups + (merged,), merged)

    if group.is_superset:
        if not _is_adjacent_to_gym(groups, index, current):
            # Standalone superset
            return _MergeState(state.final_groups + (group,), None)

        if current is not None:
            merged = current.model_copy(
                update={"exercises": _insert_by_order(current.exercises, group.exercises)}
            )
            return _MergeState(_replace_last(state.final_groups, merged), merged)

        # Adjacent via a following gym group, nothing open yet
        merged = _open_gym_merged(group.exercises)
        return _MergeState(state.final_groups + (merged,), merged)

    return _MergeState(state.final_groups + (group,), None)


def merge_gym_groups(groups: Sequence[ExerciseGroup]) -> List[ExerciseGroup]:
    """
    Merge gym groups with adjacent supersets.

    Gym groups become "gymMerged" groups. A superset joins the open
    gym-merged group when it is adjacent to gym content; otherwise it stays a
    standalone group. Any non-gym, non-superset group closes the open
    gym-merged group. Two supersets are never merged with each other.

    Args:
        groups: Output of group_exercises_by_type()

    Returns:
        Final groups, each with exercises sorted by preset_order
    """
    groups = list(groups)
    state = reduce(
        lambda acc, index: _merge_step(groups, acc, index),
        range(len(groups)),
        _MergeState(),
    )

    # Restore interleaved order after splicing supersets into gym groups
    return [
        group.model_copy(update={"exercises": sort_exercises(group.exercises)})
        for group in state.final_groups
    ]


# =============================================================================
# Public entry points
# =============================================================================


def group_exercises(exercises: Iterable[ExerciseInstance]) -> List[ExerciseGroup]:
    """
    Group a session's exercises for rendering.

    Args:
        exercises: Exercise instances in any order

    Returns:
        Ordered groups; gym exercises and their adjacent supersets share a
        "gymMerged" group
    """
    sorted_exercises = sort_exercises(exercises)
    initial_groups = group_exercises_by_type(sorted_exercises)
    final_groups = merge_gym_groups(initial_groups)

    logger.debug(
        f"Grouped {len(sorted_exercises)} exercises into {len(final_groups)} groups"
    )
    return final_groups


def separate_gym_and_supersets(group: ExerciseGroup) -> SeparatedGymGroup:
    """
    Split a gym-merged group into plain gym exercises and its supersets.

    Supersets are listed in the order their ids first appear in the group.

    Args:
        group: Exercise group (normally of type gymMerged)

    Returns:
        SeparatedGymGroup with sorted gym exercises and one superset group
        per superset id
    """
    gym_exercises = [ex for ex in group.exercises if ex.superset_id is None]

    superset_members: Dict[int, List[ExerciseInstance]] = {}
    for exercise in group.exercises:
        if exercise.superset_id is not None:
            superset_members.setdefault(exercise.superset_id, []).append(exercise)

    supersets = [
        ExerciseGroup(
            type=ExerciseGroupType.SUPERSET,
            id=superset_id,
            exercises=sort_exercises(members),
        )
        for superset_id, members in superset_members.items()
    ]

    return SeparatedGymGroup(
        gym_exercises=sort_exercises(gym_exercises),
        supersets=supersets,
    )


def group_exercises_with_separate_supersets(
    exercises: Iterable[ExerciseInstance],
) -> List[ExerciseGroup]:
    """
    Group exercises, then pull supersets back out of gym-merged groups.

    Uses the same adjacency merge as group_exercises() so ordering matches,
    but renders gym work and supersets as distinct groups: each gym-merged
    group becomes a "gym" group (omitted if empty) followed by one
    "superset" group per superset id.
    """
    final_groups: List[ExerciseGroup] = []

    for group in group_exercises(exercises):
        if not group.is_gym_merged:
            final_groups.append(group)
            continue

        separated = separate_gym_and_supersets(group)
        if separated.gym_exercises:
            final_groups.append(
                ExerciseGroup(type=ExerciseGroupType.GYM, exercises=separated.gym_exercises)
            )
        final_groups.extend(separated.supersets)

    return final_groups


def get_exercises_for_group_type(
    groups: Iterable[ExerciseGroup],
    group_type: ExerciseGroupType,
) -> List[ExerciseInstance]:
    """Flatten exercises of every group matching ``group_type``, in order."""
    return [
        exercise
        for group in groups
        if group.type == group_type
        for exercise in group.exercises
    ]


def group_contains_supersets(group: ExerciseGroup) -> bool:
    """Check if any exercise in the group belongs to a superset."""
    return any(exercise.in_superset for exercise in group.exercises)


def flatten_groups(groups: Iterable[ExerciseGroup]) -> List[ExerciseInstance]:
    """Concatenate the exercises of all groups in group order."""
    return [exercise for group in groups for exercise in group.exercises]
