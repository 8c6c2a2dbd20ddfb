"""
Shared pytest fixtures for the Fitness Coach tests.
"""
import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from fitcoach.config import settings
from fitcoach.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-test")
    return "sk-test"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", None)


def make_completion(content=None, tool_calls=None):
    """Build an object shaped like an OpenAI chat completion."""
    message = SimpleNamespace(content=content, tool_calls=tool_calls)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_tool_call(call_id, name, args):
    return SimpleNamespace(
        id=call_id,
        function=SimpleNamespace(name=name, arguments=json.dumps(args)),
    )
