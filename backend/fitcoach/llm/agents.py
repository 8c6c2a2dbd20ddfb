from __future__ import annotations
from typing import Any, Dict, List, Optional

from ..errors import NotFoundError
from .tools import call_tool, function_specs


class BaseAgent:
    name: str = "agent"
    instructions: str = ""
    tool_ids: List[str] = []

    def tools(self) -> List[Dict[str, Any]]:
        return function_specs(self.tool_ids)

    def execute(self, tool_name: str, args: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if tool_name not in self.tool_ids:
            return None
        return call_tool(tool_name, args)


class FitnessAgent(BaseAgent):
    name = "bodyAgent"
    tool_ids = ["calculate-calories", "generate-diet-plan", "generate-workout-plan"]
    instructions = (
        "You are a professional fitness and nutrition assistant who builds personalized "
        "workout and diet plans.\n\n"
        "Your job:\n"
        "1. Collect the user's body parameters (height, weight, age, gender, activity level).\n"
        "2. Calculate their BMR (basal metabolic rate) and TDEE (total daily energy expenditure).\n"
        "3. Build a diet plan for their goal (lose / maintain / gain weight).\n"
        "4. Build a workout plan for their fitness level and goal.\n"
        "5. As soon as you have enough information, return the diet plan and the workout plan "
        "as markdown tables.\n\n"
        "When talking to the user:\n"
        "- Be friendly and professional, and care about their health.\n"
        "- If body parameters are missing, ask for them.\n"
        "- Gender options: male or female.\n"
        "- Activity factors:\n"
        "  * 1.2 - sedentary (office work, little exercise)\n"
        "  * 1.375 - light activity (easy exercise 1-3 times a week)\n"
        "  * 1.55 - moderate activity (moderate exercise 3-5 times a week)\n"
        "  * 1.725 - high activity (hard exercise 6-7 times a week)\n"
        "  * 1.9 - extreme activity (hard daily training or physical labour)\n"
        "- Personalize advice to the user's situation.\n"
        "- Stress health and safety and recommend gradual progression.\n"
        "- Where appropriate, suggest consulting a doctor or a professional coach.\n\n"
        "Use the available tools to calculate calories and to generate diet and workout plans. "
        "Base every calculation and recommendation on sound exercise and nutrition science."
    )


# Agent roster, keyed by the name clients pass as agentName
AGENTS: Dict[str, BaseAgent] = {
    FitnessAgent.name: FitnessAgent(),
}


def list_agents() -> List[str]:
    return list(AGENTS)


def get_agent(name: str) -> BaseAgent:
    agent = AGENTS.get(name)
    if agent is None:
        raise NotFoundError(f"Agent '{name}' not found", availableAgents=list_agents())
    return agent
