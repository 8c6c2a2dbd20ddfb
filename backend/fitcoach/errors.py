"""
Error taxonomy shared by the planners, the tool surface and the HTTP routes.

Every error knows its HTTP status and how to render itself as a JSON
envelope; the FastAPI exception handlers in ``main`` are the only place
that turns them into responses.
"""
from typing import Any, Dict, Optional


class FitCoachError(Exception):
    """Base class for errors surfaced to callers."""

    status_code: int = 500

    def __init__(self, message: str, **extra: Any):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class ValidationError(FitCoachError):
    """Input outside its declared range or enumeration."""

    status_code = 400


class NotFoundError(FitCoachError):
    """Unknown route, agent or tool."""

    status_code = 404


class UpstreamError(FitCoachError):
    """The LLM service failed, timed out or is not configured."""

    status_code = 500

    def __init__(self, message: str, agent: Optional[str] = None):
        super().__init__(message)
        self.agent = agent

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": "Agent execution failed", "message": self.message}
        if self.agent:
            body["agent"] = self.agent
        return body


class UnknownError(FitCoachError):
    """Any uncaught fault."""

    status_code = 500

    def to_dict(self) -> Dict[str, Any]:
        return {"error": "Internal Server Error", "message": self.message}
