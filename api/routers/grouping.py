"""
Exercise grouping router.

This router exposes the grouping engine to the session renderers:
- Group a session's exercises (merged or separate-superset layout)
- Split a gymMerged group back into gym exercises and supersets
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_settings
from api.schemas.grouping import (
    GroupExercisesRequest,
    GroupExercisesResponse,
    SeparateGroupRequest,
)
from backend.core.exercise_grouping import (
    group_exercises,
    group_exercises_with_separate_supersets,
    separate_gym_and_supersets,
)
from backend.settings import Settings
from domain.models import SeparatedGymGroup

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/grouping",
    tags=["Grouping"],
)


@router.post("/groups", response_model=GroupExercisesResponse)
def create_groups(
    request: GroupExercisesRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Group a session's exercises for rendering.

    Args:
        request: Exercises plus the desired superset layout

    Returns:
        Ordered exercise groups

    Raises:
        HTTPException: 413 if more exercises than the configured limit
    """
    if len(request.exercises) > settings.max_exercises_per_request:
        raise HTTPException(
            status_code=413,
            detail=(
                f"Too many exercises: {len(request.exercises)} "
                f"(max {settings.max_exercises_per_request})"
            ),
        )

    if request.separate_supersets:
        groups = group_exercises_with_separate_supersets(request.exercises)
    else:
        groups = group_exercises(request.exercises)

    return GroupExercisesResponse(
        groups=groups,
        total_exercises=len(request.exercises),
        group_count=len(groups),
    )


@router.post("/separate", response_model=SeparatedGymGroup)
def separate_group(request: SeparateGroupRequest):
    """
    Split a gymMerged group into plain gym exercises and supersets.

    Args:
        request: The group to split

    Returns:
        Gym exercises and one superset group per superset id
    """
    return separate_gym_and_supersets(request.group)
