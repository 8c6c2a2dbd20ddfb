"""
Agent roster listing.
"""
from fastapi import APIRouter

from .. import schemas
from ..llm.agents import list_agents

router = APIRouter(prefix="/api/agents", tags=["Agents"])


@router.get("", response_model=schemas.AgentsResponse)
def get_agents():
    """List the names of all registered agents."""
    agents = list_agents()
    return schemas.AgentsResponse(agents=agents, count=len(agents))
