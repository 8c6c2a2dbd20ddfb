"""
Deterministic planners: calorie calculator, diet plan and workout plan.

All three are pure functions. Each validates its own input first and
raises ``fitcoach.errors.ValidationError`` instead of coercing bad values.
"""
from .calories import calculate_calories, calculate_bmr
from .diet import generate_diet_plan, macro_ratios
from .workout import generate_workout_plan, exercises_per_session

__all__ = [
    "calculate_calories", "calculate_bmr",
    "generate_diet_plan", "macro_ratios",
    "generate_workout_plan", "exercises_per_session",
]
