"""
Progression template router.

This router provides endpoints for the plan wizard:
- List the available progression models
- Generate a weekly intensity/volume template for a model
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_settings
from api.schemas.progression import (
    ProgressionModelResponse,
    ProgressionTemplateRequest,
    ProgressionTemplateResponse,
)
from backend.core.progression_templates import generate_progression_template
from backend.settings import Settings
from domain.models import (
    PROGRESSION_MODEL_CATALOG,
    ProgressionOptions,
    get_model_name,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/progression",
    tags=["Progression"],
)


@router.get("/models", response_model=List[ProgressionModelResponse])
def list_models():
    """
    List the progression models offered by the plan wizard.

    Returns:
        Model id, display name, description and tunable option names
    """
    return [
        ProgressionModelResponse(
            id=info.model.value,
            name=info.name,
            description=info.description,
            options=list(info.options),
        )
        for info in PROGRESSION_MODEL_CATALOG.values()
    ]


@router.post("/template", response_model=ProgressionTemplateResponse)
def create_template(
    request: ProgressionTemplateRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Generate a weekly progression template.

    Non-positive durations return an empty template. Unknown model ids use
    the linear formula and are reported as "Custom Model".

    Args:
        request: Model, duration, base values and options

    Returns:
        One intensity/volume entry per week

    Raises:
        HTTPException: 413 if duration exceeds the configured maximum
    """
    if request.duration > settings.max_template_weeks:
        raise HTTPException(
            status_code=413,
            detail=(
                f"Duration {request.duration} exceeds maximum of "
                f"{settings.max_template_weeks} weeks"
            ),
        )

    options = request.options or ProgressionOptions()
    if "deload_factor" not in options.model_fields_set:
        options = options.model_copy(
            update={"deload_factor": settings.default_deload_factor}
        )

    weeks = generate_progression_template(
        request.model,
        request.duration,
        request.base_intensity,
        request.base_volume,
        options,
    )
    logger.debug(f"Generated {len(weeks)}-week '{request.model}' template")

    return ProgressionTemplateResponse(
        model=request.model,
        model_name=get_model_name(request.model),
        duration=request.duration,
        weeks=weeks,
    )
