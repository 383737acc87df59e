"""
Progression template generator.

Builds per-week intensity/volume targets (1-10 scale) for the plan wizard:
- 5 progression models (Linear, Undulating, Accumulation, Transmutation,
  Realization)
- Periodic deload weeks that scale values down without counting toward
  progression
- Clamping and half-up rounding of every week's values

The output is a suggested default; a coach may override any week.
"""

import logging
import math
from typing import List, Optional, Tuple, Union

from domain.models.progression import (
    SCALE_MAX,
    SCALE_MIN,
    EffectiveWeek,
    OptionsInput,
    ProgressionModel,
    ProgressionOptions,
    ProgressionWeek,
)

logger = logging.getLogger(__name__)

# (intensity, volume) before rounding
WeekValues = Tuple[float, float]


# =============================================================================
# Numeric Helpers
# =============================================================================


def clamp(value: float, minimum: float = SCALE_MIN, maximum: float = SCALE_MAX) -> float:
    """
    Clamp a value to [minimum, maximum].

    NaN clamps to ``maximum``, so the result is always a usable number.
    """
    return max(minimum, min(maximum, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def _compound(base: float, rate: float, periods: int) -> float:
    """base * (1 + rate) ** periods, saturating instead of overflowing."""
    try:
        return base * (1 + rate) ** periods
    except OverflowError:
        if base == 0:
            return 0.0
        return math.copysign(math.inf, base)


def _has_deloads(deload_frequency: Optional[int]) -> bool:
    return deload_frequency is not None and deload_frequency > 0


def get_effective_week(
    week: int, total_weeks: int, deload_frequency: Optional[int]
) -> EffectiveWeek:
    """
    Compute the week's position with deload weeks excluded.

    Every ``deload_frequency``-th week is a deload. Deloads that have already
    passed don't count toward progression, so the curve is compressed over
    the non-deload weeks of the cycle.

    Args:
        week: Current week number (1-indexed)
        total_weeks: Total program duration
        deload_frequency: Deload every N weeks (None or <= 0 for no deloads)

    Returns:
        EffectiveWeek(effective_week, max_effective_weeks)
    """
    if not _has_deloads(deload_frequency):
        return EffectiveWeek(week, total_weeks)

    deloads_so_far = (week - 1) // deload_frequency
    total_deloads = (total_weeks - 1) // deload_frequency
    return EffectiveWeek(week - deloads_so_far, total_weeks - total_deloads)


def progress_fraction(effective_week: int, max_effective_weeks: int) -> float:
    """Fraction of the cycle completed: 0.0 at week 1, 1.0 at the last effective week."""
    if max_effective_weeks <= 1:
        return 0.0
    return (effective_week - 1) / (max_effective_weeks - 1)


def is_deload_week(week: int, deload_frequency: Optional[int]) -> bool:
    """Check if ``week`` is a scheduled deload."""
    if not _has_deloads(deload_frequency):
        return False
    return week % deload_frequency == 0


def _finish_week(
    intensity: float, volume: float, week: int, options: ProgressionOptions
) -> WeekValues:
    """Apply the deload reduction (if due) and clamp both values."""
    if is_deload_week(week, options.deload_frequency):
        intensity *= options.deload_factor
        volume *= options.deload_factor
    return (clamp(intensity), clamp(volume))


def _fraction_for(week: int, total_weeks: int, options: ProgressionOptions) -> float:
    effective = get_effective_week(week, total_weeks, options.deload_frequency)
    return progress_fraction(effective.effective_week, effective.max_effective_weeks)


# =============================================================================
# Progression Models
# =============================================================================


def linear_progression(
    base_intensity: float,
    base_volume: float,
    week: int,
    total_weeks: int,
    options: ProgressionOptions,
) -> WeekValues:
    """
    Linear progression.

    Compound growth by ``progression_rate`` per effective week:
    ``value = base * (1 + rate) ** (effective_week - 1)``.
    """
    effective_week, _ = get_effective_week(week, total_weeks, options.deload_frequency)
    periods = effective_week - 1

    intensity = _compound(base_intensity, options.progression_rate, periods)
    volume = _compound(base_volume, options.progression_rate, periods)

    return _finish_week(intensity, volume, week, options)


def undulating_progression(
    base_intensity: float,
    base_volume: float,
    week: int,
    total_weeks: int,
    options: ProgressionOptions,
) -> WeekValues:
    """
    Undulating progression.

    Linear trend from base toward 10 plus a wave: sine for intensity, cosine
    for volume. The wave is driven by the nominal week so deload weeks still
    advance the oscillation.
    """
    fraction = _fraction_for(week, total_weeks, options)

    # A vanishingly small period overflows the phase; treat it like no wave
    phase = 2 * math.pi * (week - 1) / options.period if options.period > 0 else math.nan
    if math.isfinite(phase):
        intensity_wave = options.amplitude * math.sin(phase)
        volume_wave = options.amplitude * math.cos(phase)
    else:
        intensity_wave = volume_wave = 0.0

    intensity = base_intensity + (SCALE_MAX - base_intensity) * fraction + intensity_wave
    volume = base_volume + (SCALE_MAX - base_volume) * fraction + volume_wave

    return _finish_week(intensity, volume, week, options)


def accumulation_phase(
    base_intensity: float,
    base_volume: float,
    week: int,
    total_weeks: int,
    options: ProgressionOptions,
) -> WeekValues:
    """
    Accumulation phase.

    Volume ramps linearly to 10 while intensity rises only by
    ``intensity_delta`` over the whole cycle.
    """
    fraction = _fraction_for(week, total_weeks, options)

    intensity = base_intensity + options.intensity_delta * fraction
    volume = base_volume + (SCALE_MAX - base_volume) * fraction

    return _finish_week(intensity, volume, week, options)


def transmutation_phase(
    base_intensity: float,
    base_volume: float,
    week: int,
    total_weeks: int,
    options: ProgressionOptions,
) -> WeekValues:
    """
    Transmutation phase.

    Intensity ramps linearly to 10; volume moves by at most ``volume_delta``
    and never past 10.
    """
    fraction = _fraction_for(week, total_weeks, options)

    volume_change = min(options.volume_delta, SCALE_MAX - base_volume)
    intensity = base_intensity + (SCALE_MAX - base_intensity) * fraction
    volume = base_volume + volume_change * fraction

    return _finish_week(intensity, volume, week, options)


def realization_phase(
    base_intensity: float,
    base_volume: float,
    week: int,
    total_weeks: int,
    options: ProgressionOptions,
) -> WeekValues:
    """
    Realization (peaking/tapering) phase.

    Intensity ramps to 10 while volume moves toward ``target_volume``
    (a taper when the target is below the base volume).
    """
    fraction = _fraction_for(week, total_weeks, options)

    intensity = base_intensity + (SCALE_MAX - base_intensity) * fraction
    volume = base_volume + (options.target_volume - base_volume) * fraction

    return _finish_week(intensity, volume, week, options)


# =============================================================================
# Template Generation
# =============================================================================


def resolve_model(model: Union[str, ProgressionModel, None]) -> ProgressionModel:
    """Resolve a model name, falling back to linear for unknown names."""
    try:
        return ProgressionModel(model)
    except ValueError:
        logger.debug(f"Unknown progression model {model!r}, using linear")
        return ProgressionModel.LINEAR


def resolve_options(options: OptionsInput) -> ProgressionOptions:
    """Accept ProgressionOptions, a plain dict (snake or camel keys), or None."""
    if options is None:
        return ProgressionOptions()
    if isinstance(options, ProgressionOptions):
        return options
    return ProgressionOptions.model_validate(options)


def calculate_week(
    model: ProgressionModel,
    week: int,
    total_weeks: int,
    base_intensity: float,
    base_volume: float,
    options: ProgressionOptions,
) -> WeekValues:
    """
    Calculate clamped, unrounded values for one week.

    Args:
        model: Resolved progression model
        week: Current week number (1-indexed)
        total_weeks: Total program duration
        base_intensity: Starting intensity (1-10)
        base_volume: Starting volume (1-10)
        options: Model options

    Returns:
        Tuple of (intensity, volume)
    """
    if model == ProgressionModel.UNDULATING:
        calculate = undulating_progression
    elif model == ProgressionModel.ACCUMULATION:
        calculate = accumulation_phase
    elif model == ProgressionModel.TRANSMUTATION:
        calculate = transmutation_phase
    elif model == ProgressionModel.REALIZATION:
        calculate = realization_phase
    else:
        calculate = linear_progression

    return calculate(base_intensity, base_volume, week, total_weeks, options)


def generate_progression_template(
    model: Union[str, ProgressionModel],
    duration: int,
    base_intensity: float,
    base_volume: float,
    options: OptionsInput = None,
) -> List[ProgressionWeek]:
    """
    Generate a complete progression template.

    This is the main entry point. It never raises for numeric input: values
    outside the scale are clamped and non-positive durations yield an empty
    template.

    Args:
        model: Model id (e.g., "linear") or ProgressionModel; unknown ids
               use linear
        duration: Number of weeks
        base_intensity: Starting intensity (1-10)
        base_volume: Starting volume (1-10)
        options: Model options (ProgressionOptions, dict, or None)

    Returns:
        One ProgressionWeek per week, in week order
    """
    if duration <= 0:
        return []

    resolved_model = resolve_model(model)
    resolved_options = resolve_options(options)

    template = []
    for week in range(1, duration + 1):
        intensity, volume = calculate_week(
            resolved_model,
            week,
            duration,
            base_intensity,
            base_volume,
            resolved_options,
        )
        template.append(
            ProgressionWeek(
                week=week,
                intensity=round_half_up(intensity),
                volume=round_half_up(volume),
            )
        )

    return template
