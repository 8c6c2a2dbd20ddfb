"""
Direct HTTP access to the planner tools.

GET  /api/tools            - list tool ids with their parameter schemas
POST /api/tools/{tool_id}  - run one tool; the JSON body is the tool context
"""
from typing import Any, Dict

from fastapi import APIRouter, Body

from .. import schemas
from ..llm.tools import call_tool, describe_tools

router = APIRouter(prefix="/api/tools", tags=["Tools"])


@router.get("", response_model=schemas.ToolsResponse)
def get_tools():
    tools = describe_tools()
    return {"tools": tools, "count": len(tools)}


@router.post("/{tool_id}")
def run_tool(tool_id: str, context: Any = Body(None)) -> Dict[str, Any]:
    """
    Run a planner tool.

    - **calculate-calories**: height, weight, age, gender, activityLevel
    - **generate-diet-plan**: targetCalories, goal, dietPreference?
    - **generate-workout-plan**: fitnessLevel, goal, daysPerWeek, timePerSession

    Returns 400 when the context fails validation and 404 for an unknown tool.
    """
    return call_tool(tool_id, context)
