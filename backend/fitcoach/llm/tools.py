"""
Tool-call surface: the three planners exposed as function tools.

Each tool has an id, a description, a JSON-schema for its parameters
(OpenAI function-calling format) and a handler that takes the raw context
dict and returns a camelCase result dict.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List

from ..errors import NotFoundError, ValidationError
from ..planners import calculate_calories, generate_diet_plan, generate_workout_plan
from ..schemas import ACTIVITY_LEVELS, DietPlanRequest, WorkoutPlanRequest
from ..validation import validate

logger = logging.getLogger(__name__)


def _calories(ctx: Dict[str, Any]) -> Dict[str, Any]:
    return calculate_calories(ctx).model_dump(by_alias=True)


def _diet(ctx: Dict[str, Any]) -> Dict[str, Any]:
    req = validate(DietPlanRequest, ctx)
    return generate_diet_plan(
        req.target_calories, req.goal, req.diet_preference
    ).model_dump(by_alias=True)


def _workout(ctx: Dict[str, Any]) -> Dict[str, Any]:
    req = validate(WorkoutPlanRequest, ctx)
    return generate_workout_plan(
        req.fitness_level, req.goal, req.days_per_week, req.time_per_session
    ).model_dump(by_alias=True)


TOOLS: Dict[str, Dict[str, Any]] = {
    "calculate-calories": {
        "description": "Calculate BMR (Basal Metabolic Rate) and TDEE (Total Daily Energy Expenditure)",
        "parameters": {
            "type": "object",
            "properties": {
                "height": {"type": "number", "minimum": 100, "maximum": 250, "description": "Height (cm)"},
                "weight": {"type": "number", "minimum": 20, "maximum": 200, "description": "Weight (kg)"},
                "age": {"type": "number", "minimum": 10, "maximum": 100, "description": "Age (years)"},
                "gender": {"type": "string", "enum": ["male", "female"], "description": "Gender"},
                "activityLevel": {
                    "type": "string",
                    "enum": [str(k) for k in ACTIVITY_LEVELS],
                    "description": "Activity factor",
                },
            },
            "required": ["height", "weight", "age", "gender", "activityLevel"],
        },
        "handler": _calories,
    },
    "generate-diet-plan": {
        "description": "Generate personalized diet plan based on calorie needs and goals",
        "parameters": {
            "type": "object",
            "properties": {
                "targetCalories": {"type": "number", "description": "Target daily calorie intake"},
                "goal": {"type": "string", "enum": ["lose", "maintain", "gain"], "description": "Lose / maintain / gain weight"},
                "dietPreference": {
                    "type": "string",
                    "enum": ["normal", "vegetarian", "keto", "mediterranean"],
                    "description": "Diet preference",
                },
            },
            "required": ["targetCalories", "goal"],
        },
        "handler": _diet,
    },
    "generate-workout-plan": {
        "description": "Generate personalized workout plan based on fitness level and goals",
        "parameters": {
            "type": "object",
            "properties": {
                "fitnessLevel": {"type": "string", "enum": ["beginner", "intermediate", "advanced"], "description": "Fitness level"},
                "goal": {
                    "type": "string",
                    "enum": ["lose_weight", "build_muscle", "improve_endurance", "general_fitness"],
                    "description": "Fitness goal",
                },
                "daysPerWeek": {"type": "integer", "minimum": 1, "maximum": 7, "description": "Training days per week"},
                "timePerSession": {"type": "number", "minimum": 15, "maximum": 180, "description": "Minutes per session"},
            },
            "required": ["fitnessLevel", "goal", "daysPerWeek", "timePerSession"],
        },
        "handler": _workout,
    },
}


def list_tools() -> List[str]:
    return list(TOOLS)


def describe_tools() -> List[Dict[str, Any]]:
    return [
        {"id": tool_id, "description": t["description"], "parameters": t["parameters"]}
        for tool_id, t in TOOLS.items()
    ]


def function_specs(tool_ids: List[str]) -> List[Dict[str, Any]]:
    """OpenAI ``tools=`` entries for the given tool ids."""
    return [
        {
            "type": "function",
            "function": {
                "name": tool_id,
                "description": TOOLS[tool_id]["description"],
                "parameters": TOOLS[tool_id]["parameters"],
            },
        }
        for tool_id in tool_ids
    ]


def get_handler(tool_id: str) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    tool = TOOLS.get(tool_id)
    if tool is None:
        raise NotFoundError(f"Tool '{tool_id}' not found", availableTools=list_tools())
    return tool["handler"]


def call_tool(tool_id: str, context: Dict[str, Any]) -> Dict[str, Any]:
    """Validate ``context``, run the named planner and return its result unchanged.

    Raises:
        NotFoundError: Unknown tool id.
        ValidationError: Context fails the tool's ranges or enumerations.
    """
    handler = get_handler(tool_id)
    if context is None:
        context = {}
    if not isinstance(context, dict):
        raise ValidationError("Tool context must be a JSON object")
    logger.info(f"Tool call: {tool_id}")
    return handler(context)
