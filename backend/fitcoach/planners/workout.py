"""
Workout plan synthesizer.

Each fitness level has a fixed exercise table. A session gets one exercise
per 15 minutes, capped by the table size, and every training day of the
week repeats the same exercises.
"""
import math
from typing import Dict, Tuple

from ..schemas import DayPlan, Exercise, WorkoutPlanRequest, WorkoutPlanResult
from ..validation import validate

MINUTES_PER_EXERCISE = 15

EXERCISES: Dict[str, Tuple[Exercise, ...]] = {
    "beginner": (
        Exercise(name="Squats", sets="2-3", reps="8-12", rest="60 sec"),
        Exercise(name="Push-ups", sets="2-3", reps="5-10", rest="60 sec"),
        Exercise(name="Plank", sets="2-3", reps="20-30 sec", rest="60 sec"),
        Exercise(name="Brisk walk", sets="1", reps="15-20 min", rest="none"),
    ),
    "intermediate": (
        Exercise(name="Squats", sets="3-4", reps="10-15", rest="45 sec"),
        Exercise(name="Push-ups", sets="3-4", reps="10-15", rest="45 sec"),
        Exercise(name="Plank", sets="3", reps="30-60 sec", rest="45 sec"),
        Exercise(name="Jogging", sets="1", reps="20-30 min", rest="none"),
        Exercise(name="Dumbbell rows", sets="3", reps="10-12", rest="45 sec"),
    ),
    "advanced": (
        Exercise(name="Squats", sets="4-5", reps="12-20", rest="30 sec"),
        Exercise(name="Push-up variations", sets="4", reps="15-20", rest="30 sec"),
        Exercise(name="Plank", sets="3", reps="60-90 sec", rest="30 sec"),
        Exercise(name="Running", sets="1", reps="30-45 min", rest="none"),
        Exercise(name="Pull-ups", sets="3-4", reps="5-12", rest="45 sec"),
    ),
}

WORKOUT_TIPS = (
    "Warm up for 5-10 minutes before training",
    "Stretch and cool down after training",
    "Progress gradually and avoid overtraining",
    "Keep proper form; quality over quantity",
    "Rest well, muscles grow during recovery",
    "Stop immediately if you feel pain",
)


def exercises_per_session(fitness_level: str, time_per_session: float) -> int:
    """Number of exercises that fit in one session for a level."""
    return min(len(EXERCISES[fitness_level]), math.floor(time_per_session / MINUTES_PER_EXERCISE))


def generate_workout_plan(
    fitness_level: str,
    goal: str,
    days_per_week: int,
    time_per_session: float,
) -> WorkoutPlanResult:
    """Build a weekly plan with ``days_per_week`` identical training days.

    ``goal`` is validated but does not change exercise selection or tips.

    Raises:
        ValidationError: If fitness_level or goal is unknown, days_per_week is
            outside 1-7 or time_per_session outside 15-180 minutes.
    """
    req = validate(WorkoutPlanRequest, {
        "fitness_level": fitness_level,
        "goal": goal,
        "days_per_week": days_per_week,
        "time_per_session": time_per_session,
    })

    count = exercises_per_session(req.fitness_level, req.time_per_session)
    session = list(EXERCISES[req.fitness_level][:count])

    return WorkoutPlanResult(
        weekly_plan=[
            DayPlan(day=f"Day {k}", exercises=session)
            for k in range(1, req.days_per_week + 1)
        ],
        tips=list(WORKOUT_TIPS),
    )
