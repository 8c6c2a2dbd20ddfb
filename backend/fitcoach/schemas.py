"""
Pydantic schemas for planner inputs, planner results and the HTTP envelopes.

Field names are snake_case in Python and camelCase on the wire.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Dict, List, Literal, Optional


Gender = Literal["male", "female"]
DietGoal = Literal["lose", "maintain", "gain"]
DietPreference = Literal["normal", "vegetarian", "keto", "mediterranean"]
FitnessLevel = Literal["beginner", "intermediate", "advanced"]
WorkoutGoal = Literal["lose_weight", "build_muscle", "improve_endurance", "general_fitness"]

# Activity factor -> label
ACTIVITY_LEVELS: Dict[float, str] = {
    1.2: "sedentary",      # little or no exercise
    1.375: "light",        # 1-3 sessions a week
    1.55: "moderate",      # 3-5 sessions a week
    1.725: "active",       # 6-7 sessions a week
    1.9: "extreme",        # daily hard training or physical labour
}


class CamelModel(BaseModel):
    """Immutable value object, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False,
    )


# ============ Metabolic Calculator ============

class BodyMetrics(CamelModel):
    """Body parameters for the BMR/TDEE calculation."""
    height: float = Field(..., ge=100, le=250)  # cm
    weight: float = Field(..., ge=20, le=200)  # kg
    age: float = Field(..., ge=10, le=100)  # years
    gender: Gender
    activity_factor: float = Field(
        ...,
        validation_alias=AliasChoices("activityFactor", "activityLevel", "activity_factor"),
    )

    @field_validator("activity_factor")
    @classmethod
    def check_activity_factor(cls, v: float) -> float:
        if v not in ACTIVITY_LEVELS:
            allowed = ", ".join(str(k) for k in ACTIVITY_LEVELS)
            raise ValueError(f"must be one of: {allowed}")
        return v


class EnergyResult(CamelModel):
    bmr: int
    tdee: int
    weight_loss: int
    weight_gain: int
    activity_description: str


# ============ Diet Planner ============

class DietPlanRequest(CamelModel):
    target_calories: float = Field(..., gt=0)
    goal: DietGoal
    # Accepted and validated; does not change the generated plan yet.
    diet_preference: Optional[DietPreference] = None


class DailyPlan(CamelModel):
    breakfast: str
    lunch: str
    dinner: str
    snacks: str


class Macronutrients(CamelModel):
    protein: str
    carbs: str
    fat: str


class DietPlanResult(CamelModel):
    daily_plan: DailyPlan
    macronutrients: Macronutrients
    tips: List[str]


# ============ Workout Planner ============

class WorkoutPlanRequest(CamelModel):
    fitness_level: FitnessLevel
    # Accepted and validated; does not change the generated plan yet.
    goal: WorkoutGoal
    days_per_week: int = Field(..., ge=1, le=7)
    time_per_session: float = Field(..., ge=15, le=180)  # minutes


class Exercise(CamelModel):
    name: str
    sets: str
    reps: str
    rest: str


class DayPlan(CamelModel):
    day: str
    exercises: List[Exercise]


class WorkoutPlanResult(CamelModel):
    weekly_plan: List[DayPlan]
    tips: List[str]


# ============ HTTP envelopes ============

class ChatRequest(CamelModel):
    """Body of POST /api/chat. Presence of ``message`` is checked by the route."""
    message: Optional[str] = None
    agent_name: Optional[str] = None


class ChatResponse(CamelModel):
    response: str
    agent: str
    timestamp: str


class HealthResponse(CamelModel):
    status: str
    timestamp: str
    message: str
    agents: List[str]


class AgentsResponse(CamelModel):
    agents: List[str]
    count: int


class ToolInfo(CamelModel):
    id: str
    description: str
    parameters: Dict


class ToolsResponse(CamelModel):
    tools: List[ToolInfo]
    count: int
