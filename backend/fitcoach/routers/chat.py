"""
Chat endpoint that forwards a user message to a registered agent.

POST /api/chat
- Body: {"message": str, "agentName"?: str}
- Uses OpenAI function calling with the agent's planner tools.

Environment: settings.openai_api_key must be set (OPENAI_API_KEY).
"""
import logging

from fastapi import APIRouter

from .. import schemas
from ..config import settings
from ..errors import UpstreamError, ValidationError
from ..llm.agents import get_agent
from ..llm.orchestrator import AgentOrchestrator
from ..utils import utc_timestamp

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["Chat"])


@router.post("", response_model=schemas.ChatResponse)
def chat(payload: schemas.ChatRequest):
    """
    Ask an agent a question.

    - **message**: the user's message (required)
    - **agentName**: agent to talk to (defaults to the configured default agent)
    """
    if not payload.message:
        raise ValidationError("Message is required")

    agent_name = payload.agent_name or settings.default_agent
    agent = get_agent(agent_name)

    try:
        orch = AgentOrchestrator()
        reply = orch.generate(agent, payload.message)
    except UpstreamError as e:
        e.agent = e.agent or agent_name
        raise
    except Exception as e:
        logger.exception(f"Agent {agent_name} failed")
        raise UpstreamError(str(e) or "Unknown agent error", agent=agent_name) from e

    return schemas.ChatResponse(response=reply, agent=agent_name, timestamp=utc_timestamp())
