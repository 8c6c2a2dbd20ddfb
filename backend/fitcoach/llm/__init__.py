"""
LLM agent package.

Agents:
- bodyAgent (FitnessAgent): collects body parameters and builds calorie,
  diet and workout plans with the planner tools.

Tools wrap the deterministic planners; the orchestrator drives an OpenAI
function-calling loop for one agent.
"""
