"""
Tests for the HTTP surface: routes, error envelopes and CORS headers.
"""
from unittest.mock import patch

from fitcoach.errors import UpstreamError


def assert_cors(response):
    assert response.headers["access-control-allow-origin"] == "*"


# ============ /health and roster ============

def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["agents"] == ["bodyAgent"]
    assert data["timestamp"].endswith("Z")
    assert data["message"]
    assert response.headers["content-type"].startswith("application/json")
    assert_cors(response)


def test_agents(client):
    response = client.get("/api/agents")

    assert response.status_code == 200
    assert response.json() == {"agents": ["bodyAgent"], "count": 1}
    assert_cors(response)


# ============ /api/chat ============

def test_chat_requires_message(client):
    response = client.post("/api/chat", json={"agentName": "bodyAgent"})

    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}
    assert_cors(response)


def test_chat_empty_message(client):
    response = client.post("/api/chat", json={"message": ""})
    assert response.status_code == 400


def test_chat_malformed_body(client):
    response = client.post("/api/chat", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_chat_unknown_agent(client):
    response = client.post("/api/chat", json={"message": "hi", "agentName": "coach"})

    assert response.status_code == 404
    assert response.json() == {"error": "Agent 'coach' not found", "availableAgents": ["bodyAgent"]}


def test_chat_success(client):
    with patch("fitcoach.routers.chat.AgentOrchestrator") as orch_cls:
        orch_cls.return_value.generate.return_value = "Here is your plan."
        response = client.post("/api/chat", json={"message": "I am 180cm and 75kg"})

    assert response.status_code == 200
    data = response.json()
    assert data["response"] == "Here is your plan."
    assert data["agent"] == "bodyAgent"
    assert data["timestamp"].endswith("Z")
    agent, message = orch_cls.return_value.generate.call_args.args
    assert agent.name == "bodyAgent"
    assert message == "I am 180cm and 75kg"
    assert_cors(response)


def test_chat_upstream_failure(client):
    with patch("fitcoach.routers.chat.AgentOrchestrator") as orch_cls:
        orch_cls.return_value.generate.side_effect = UpstreamError("Request timed out.")
        response = client.post("/api/chat", json={"message": "hi"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Agent execution failed",
        "message": "Request timed out.",
        "agent": "bodyAgent",
    }
    assert_cors(response)


def test_chat_unexpected_agent_error(client):
    with patch("fitcoach.routers.chat.AgentOrchestrator") as orch_cls:
        orch_cls.return_value.generate.side_effect = RuntimeError("boom")
        response = client.post("/api/chat", json={"message": "hi"})

    assert response.status_code == 500
    assert response.json()["error"] == "Agent execution failed"
    assert response.json()["message"] == "boom"


def test_chat_without_api_key(client, no_api_key):
    response = client.post("/api/chat", json={"message": "hi"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Agent execution failed",
        "message": "OPENAI_API_KEY not configured",
        "agent": "bodyAgent",
    }


# ============ /api/tools ============

def test_list_tools(client):
    response = client.get("/api/tools")

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 3
    assert data["tools"][0]["id"] == "calculate-calories"
    assert "properties" in data["tools"][0]["parameters"]


def test_run_calorie_tool(client):
    response = client.post("/api/tools/calculate-calories", json={
        "height": 165, "weight": 60, "age": 25, "gender": "female", "activityLevel": "1.2",
    })

    assert response.status_code == 200
    assert response.json()["bmr"] == 1405
    assert response.json()["tdee"] == 1686
    assert_cors(response)


def test_run_workout_tool(client):
    response = client.post("/api/tools/generate-workout-plan", json={
        "fitnessLevel": "advanced", "goal": "build_muscle", "daysPerWeek": 2, "timePerSession": 60,
    })

    assert response.status_code == 200
    plan = response.json()["weeklyPlan"]
    assert len(plan) == 2
    assert len(plan[1]["exercises"]) == 4


def test_run_tool_validation_error(client):
    response = client.post("/api/tools/calculate-calories", json={
        "height": 99, "weight": 60, "age": 25, "gender": "female", "activityLevel": "1.2",
    })

    assert response.status_code == 400
    assert "height" in response.json()["error"]
    assert_cors(response)


def test_run_tool_infinite_calories(client):
    response = client.post(
        "/api/tools/generate-diet-plan",
        content=b'{"targetCalories": 1e999, "goal": "lose"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "targetCalories" in response.json()["error"]
    assert_cors(response)


def test_run_tool_without_body(client):
    response = client.post("/api/tools/generate-diet-plan")
    assert response.status_code == 400


def test_run_unknown_tool(client):
    response = client.post("/api/tools/bench-press", json={})

    assert response.status_code == 404
    assert response.json()["error"] == "Tool 'bench-press' not found"


def test_unhandled_error_is_500(client):
    with patch("fitcoach.routers.tools.call_tool", side_effect=RuntimeError("kaboom")):
        response = client.post("/api/tools/calculate-calories", json={})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error", "message": "kaboom"}
    assert_cors(response)


# ============ routing and CORS ============

def test_unknown_path(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
    assert_cors(response)


def test_wrong_method_is_not_found(client):
    response = client.delete("/health")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_options_preflight(client):
    response = client.options("/api/chat")

    assert response.status_code == 200
    assert response.content == b""
    assert_cors(response)
    assert "POST" in response.headers["access-control-allow-methods"]
    assert "Content-Type" in response.headers["access-control-allow-headers"]


def test_options_on_unknown_path(client):
    response = client.options("/anything/at/all")
    assert response.status_code == 200
