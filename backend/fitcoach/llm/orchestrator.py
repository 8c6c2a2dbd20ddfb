from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Optional, Union

from openai import OpenAI, OpenAIError

from ..config import settings
from ..errors import FitCoachError, UpstreamError
from .agents import BaseAgent, get_agent

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class AgentOrchestrator:
    """Drives one agent through an OpenAI function-calling loop.

    No retries: the client is built with ``max_retries=0`` and any OpenAI
    failure is raised once as UpstreamError.
    """

    def __init__(self, model: Optional[str] = None, client: Optional[Any] = None):
        self.model = model or (settings.model_id or DEFAULT_MODEL)
        if client is None:
            if not settings.openai_api_key:
                raise UpstreamError("OPENAI_API_KEY not configured")
            client = OpenAI(
                api_key=settings.openai_api_key,
                timeout=settings.llm_timeout_seconds,
                max_retries=0,
            )
        self.client = client

    def _complete(self, messages: List[Dict[str, Any]], tools: List[Dict[str, Any]], agent: BaseAgent):
        kwargs: Dict[str, Any] = {"model": self.model, "messages": messages, "temperature": 0.2}
        if tools:
            kwargs["tools"] = tools
        try:
            completion = self.client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            logger.error(f"LLM call failed for agent {agent.name}: {e}")
            raise UpstreamError(str(e), agent=agent.name) from e
        return completion.choices[0].message

    def _exec_tool(self, agent: BaseAgent, name: str, args: Dict[str, Any]) -> Dict[str, Any]:
        try:
            res = agent.execute(name, args)
        except FitCoachError as e:
            # Bad arguments go back to the model so it can ask the user or retry
            logger.info(f"Tool {name} rejected arguments: {e.message}")
            return {"tool": name, "ok": False, "data": e.to_dict()}
        if res is None:
            return {"tool": name, "ok": False, "data": {"error": f"Unknown tool: {name}"}}
        return {"tool": name, "ok": True, "data": res}

    def generate(self, agent: Union[BaseAgent, str], message: str) -> str:
        """Answer one user message with ``agent`` and return the reply text."""
        if isinstance(agent, str):
            agent = get_agent(agent)
        tools = agent.tools()
        chat_msgs: List[Dict[str, Any]] = [
            {"role": "system", "content": agent.instructions},
            {"role": "user", "content": message},
        ]

        msg = self._complete(chat_msgs, tools, agent)
        steps = 0
        while getattr(msg, "tool_calls", None) and steps < settings.llm_max_tool_steps:
            steps += 1
            chat_msgs.append({
                "role": "assistant",
                "content": msg.content or "",
                "tool_calls": [
                    {
                        "id": tc.id,
                        "type": "function",
                        "function": {"name": tc.function.name, "arguments": tc.function.arguments},
                    }
                    for tc in msg.tool_calls
                ],
            })
            for tc in msg.tool_calls:
                name = tc.function.name
                try:
                    args = json.loads(tc.function.arguments or "{}")
                except ValueError:
                    args = {}
                result = self._exec_tool(agent, name, args)
                chat_msgs.append({"role": "tool", "tool_call_id": tc.id, "content": json.dumps(result)})
            msg = self._complete(chat_msgs, tools, agent)

        if getattr(msg, "tool_calls", None):
            logger.warning(
                f"Agent {agent.name} hit the tool step limit ({settings.llm_max_tool_steps}); "
                "returning the reply without running further tool calls"
            )
        return msg.content or ""
