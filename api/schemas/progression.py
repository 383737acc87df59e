"""
Progression Schemas for the progression template API.

Schemas for:
- ProgressionTemplateRequest / ProgressionTemplateResponse: POST /progression/template
- ProgressionModelResponse: GET /progression/models
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models import ProgressionOptions, ProgressionWeek


class ProgressionTemplateRequest(BaseModel):
    """Request body for POST /progression/template."""
    model: str = Field(
        default="linear",
        description="Progression model id; unknown ids fall back to linear",
    )
    duration: int = Field(..., description="Number of weeks in the template")
    base_intensity: float = Field(default=5, description="Starting intensity (1-10)")
    base_volume: float = Field(default=5, description="Starting volume (1-10)")
    options: Optional[ProgressionOptions] = Field(
        default=None,
        description="Model-specific options (snake_case or camelCase keys)",
    )


class ProgressionTemplateResponse(BaseModel):
    """Response body for POST /progression/template."""
    model_config = ConfigDict(protected_namespaces=())

    model: str
    model_name: Optional[str] = None
    duration: int
    weeks: List[ProgressionWeek] = Field(default_factory=list)


class ProgressionModelResponse(BaseModel):
    """A progression model available to the plan wizard."""
    id: str
    name: str
    description: str
    options: List[str] = Field(default_factory=list)
