"""
BMR / TDEE calculator (Mifflin-St Jeor coefficients).
"""
from typing import Any, Mapping, Union

from ..schemas import ACTIVITY_LEVELS, BodyMetrics, EnergyResult
from ..utils import round_half_up
from ..validation import validate

# Daily surplus / deficit applied to TDEE for gain / loss targets
CALORIE_ADJUSTMENT = 500


def calculate_bmr(weight: float, height: float, age: float, gender: str) -> float:
    """Unrounded basal metabolic rate in kcal/day."""
    if gender == "male":
        return 88.362 + 13.397 * weight + 4.799 * height - 5.677 * age
    return 447.593 + 9.247 * weight + 3.098 * height - 4.330 * age


def calculate_calories(metrics: Union[BodyMetrics, Mapping[str, Any]]) -> EnergyResult:
    """Compute BMR, TDEE and the loss/gain calorie targets.

    TDEE is derived from the rounded BMR, so ``tdee == round(bmr * factor)``
    holds on the returned figures.

    Args:
        metrics: BodyMetrics, or a mapping with height, weight, age, gender
            and activityFactor (or activityLevel)

    Returns:
        EnergyResult with all figures rounded half-up

    Raises:
        ValidationError: If a value is out of range or the activity factor
            is not one of the five allowed levels.
    """
    m = validate(BodyMetrics, metrics)
    bmr = round_half_up(calculate_bmr(m.weight, m.height, m.age, m.gender))
    tdee = round_half_up(bmr * m.activity_factor)
    return EnergyResult(
        bmr=bmr,
        tdee=tdee,
        weight_loss=tdee - CALORIE_ADJUSTMENT,
        weight_gain=tdee + CALORIE_ADJUSTMENT,
        activity_description=ACTIVITY_LEVELS[m.activity_factor],
    )
