"""
Progression template models.

Covers the periodization models offered by the plan wizard, the options
each one accepts, and the per-week (intensity, volume) prescription.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Intensity and volume are both expressed on a 1-10 scale
SCALE_MIN = 1
SCALE_MAX = 10


class ProgressionModel(str, Enum):
    """Available progression (periodization) models."""

    LINEAR = "linear"
    UNDULATING = "undulating"
    ACCUMULATION = "accumulation"  # High volume, modest intensity increase
    TRANSMUTATION = "transmutation"  # Intensity up, volume roughly held
    REALIZATION = "realization"  # Peak intensity, taper volume


class ProgressionOptions(BaseModel):
    """
    Model-specific tuning options.

    Options that do not apply to the selected model are ignored. Values are
    not range-checked; the generator clamps its output instead. Accepts
    camelCase keys (``deloadFrequency``) as well as snake_case.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    deload_frequency: Optional[int] = Field(
        default=None, description="Every Nth week is a deload (None = no deloads)"
    )
    deload_factor: float = Field(
        default=0.8, description="Multiplier applied to deload weeks"
    )
    amplitude: float = Field(default=1, description="Undulating wave amplitude")
    period: float = Field(default=3, description="Undulating wave length in weeks")
    intensity_delta: float = Field(
        default=2, description="Accumulation: total intensity increase"
    )
    volume_delta: float = Field(
        default=2, description="Transmutation: total volume increase"
    )
    target_volume: float = Field(
        default=3, description="Realization: volume to taper toward"
    )
    progression_rate: float = Field(
        default=0.05, description="Linear: compound weekly growth rate"
    )


OptionsInput = Union[ProgressionOptions, Dict[str, object], None]


class ProgressionWeek(BaseModel):
    """One week's prescription in a progression template."""

    model_config = ConfigDict(frozen=True)

    week: int = Field(..., ge=1, description="1-based week number")
    intensity: int = Field(..., ge=SCALE_MIN, le=SCALE_MAX)
    volume: int = Field(..., ge=SCALE_MIN, le=SCALE_MAX)


class EffectiveWeek(NamedTuple):
    """Week position with deload weeks excluded from the count."""

    effective_week: int
    max_effective_weeks: int


@dataclass(frozen=True)
class ProgressionModelInfo:
    """Display metadata for a progression model."""

    model: ProgressionModel
    name: str
    description: str
    options: Tuple[str, ...] = field(default_factory=tuple)


# Options shared by every model
_DELOAD_OPTIONS = ("deload_frequency", "deload_factor")

PROGRESSION_MODEL_CATALOG: Dict[ProgressionModel, ProgressionModelInfo] = {
    ProgressionModel.LINEAR: ProgressionModelInfo(
        model=ProgressionModel.LINEAR,
        name="Linear Progression",
        description="Gradual increase in intensity and volume by a constant weekly rate.",
        options=("progression_rate",) + _DELOAD_OPTIONS,
    ),
    ProgressionModel.UNDULATING: ProgressionModelInfo(
        model=ProgressionModel.UNDULATING,
        name="Undulating Progression",
        description="Upward trend with intensity and volume varying in a wave across weeks.",
        options=("amplitude", "period") + _DELOAD_OPTIONS,
    ),
    ProgressionModel.ACCUMULATION: ProgressionModelInfo(
        model=ProgressionModel.ACCUMULATION,
        name="Accumulation Phase",
        description="Focus on increasing volume, intensity maintained or slightly increased.",
        options=("intensity_delta",) + _DELOAD_OPTIONS,
    ),
    ProgressionModel.TRANSMUTATION: ProgressionModelInfo(
        model=ProgressionModel.TRANSMUTATION,
        name="Transmutation Phase",
        description="Focus on increasing intensity, volume maintained or slightly increased.",
        options=("volume_delta",) + _DELOAD_OPTIONS,
    ),
    ProgressionModel.REALIZATION: ProgressionModelInfo(
        model=ProgressionModel.REALIZATION,
        name="Realization Phase",
        description="Intensity peaks while volume tapers toward a target level.",
        options=("target_volume",) + _DELOAD_OPTIONS,
    ),
}

CUSTOM_MODEL_NAME = "Custom Model"


def get_model_name(model: Union[str, ProgressionModel, None]) -> Optional[str]:
    """
    Get the display name for a progression model.

    Args:
        model: Model id (e.g., "linear") or ProgressionModel

    Returns:
        Display name, "Custom Model" for unknown ids, or None if no model given.
    """
    if not model:
        return None
    try:
        return PROGRESSION_MODEL_CATALOG[ProgressionModel(model)].name
    except ValueError:
        return CUSTOM_MODEL_NAME
