"""
Diet plan synthesizer: macro split, meal calorie split and general tips.
"""
from typing import Optional, Tuple

from ..schemas import DailyPlan, DietPlanRequest, DietPlanResult, Macronutrients
from ..utils import round_half_up
from ..validation import validate

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

# meal -> (share of daily calories, suggestion)
MEALS = {
    "breakfast": (0.25, "Oatmeal with fruit and nuts"),
    "lunch": (0.35, "Lean meat or fish with vegetables and brown rice"),
    "dinner": (0.30, "Grilled chicken breast with a vegetable salad"),
    "snacks": (0.10, "Nuts, fruit or yogurt"),
}

DIET_TIPS = (
    "Drink plenty of water, at least 8 glasses a day",
    "Eat smaller, more frequent meals and avoid overeating",
    "Choose natural, unprocessed foods",
    "Limit salt and sugar intake",
    "Keep a regular routine and get enough sleep",
)


def macro_ratios(goal: str) -> Tuple[float, float, float]:
    """(protein, carbs, fat) shares of total calories for a goal."""
    protein = 0.30 if goal == "gain" else 0.25
    carbs = 0.35 if goal == "lose" else 0.45
    return protein, carbs, 1 - protein - carbs


def _macro(calories: int, kcal_per_gram: int) -> str:
    return f"{round_half_up(calories / kcal_per_gram)}g ({calories} kcal)"


def _meal(target_calories: float, name: str) -> str:
    share, suggestion = MEALS[name]
    return f"{suggestion} (~{round_half_up(target_calories * share)} kcal)"


def generate_diet_plan(
    target_calories: float,
    goal: str,
    diet_preference: Optional[str] = None,
) -> DietPlanResult:
    """Build a one-day diet plan for a calorie target.

    ``diet_preference`` is validated but does not change the meals yet.

    Raises:
        ValidationError: If target_calories <= 0 or goal / diet_preference
            is not a known value.
    """
    req = validate(DietPlanRequest, {
        "target_calories": target_calories,
        "goal": goal,
        "diet_preference": diet_preference,
    })
    calories = req.target_calories

    protein_ratio, carb_ratio, fat_ratio = macro_ratios(req.goal)
    protein_cals = round_half_up(calories * protein_ratio)
    carb_cals = round_half_up(calories * carb_ratio)
    fat_cals = round_half_up(calories * fat_ratio)

    return DietPlanResult(
        daily_plan=DailyPlan(**{name: _meal(calories, name) for name in MEALS}),
        macronutrients=Macronutrients(
            protein=_macro(protein_cals, KCAL_PER_GRAM_PROTEIN),
            carbs=_macro(carb_cals, KCAL_PER_GRAM_CARBS),
            fat=_macro(fat_cals, KCAL_PER_GRAM_FAT),
        ),
        tips=list(DIET_TIPS),
    )
