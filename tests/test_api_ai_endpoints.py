import json

from fastapi.testclient import TestClient
from openai import OpenAIError

from vibeset.api.fastapi_app import app

client = TestClient(app)


def test_ai_plan_endpoint_returns_plan(use_fake_openai, good_plan) -> None:
    use_fake_openai(json.dumps(good_plan))

    response = client.post("/api/ai/plan", json={"prompt": "rainy synthwave"})
    assert response.status_code == 200
    assert response.json() == good_plan


def test_ai_plan_endpoint_missing_prompt(use_fake_openai, good_plan) -> None:
    fake = use_fake_openai(json.dumps(good_plan))

    for body in ({"prompt": "   "}, {}, None):
        response = client.post("/api/ai/plan", json=body)
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing prompt"

    assert fake.completions.calls == []


def test_ai_plan_endpoint_numeric_prompt(use_fake_openai, good_plan) -> None:
    fake = use_fake_openai(json.dumps(good_plan))

    response = client.post("/api/ai/plan", json={"prompt": 2024})
    assert response.status_code == 200

    [call] = fake.completions.calls
    assert call["messages"][1]["content"] == "User prompt: 2024"


def test_ai_plan_endpoint_missing_key(monkeypatch) -> None:
    monkeypatch.setattr("vibeset.ai.plan.OPENAI_API_KEY", None, raising=True)

    response = client.post("/api/ai/plan", json={"prompt": "rainy synthwave"})
    assert response.status_code == 500
    assert "OPENAI_API_KEY" in response.json()["detail"]


def test_ai_plan_endpoint_invalid_json(use_fake_openai) -> None:
    use_fake_openai("not json at all")

    response = client.post("/api/ai/plan", json={"prompt": "rainy synthwave"})
    assert response.status_code == 500

    detail = response.json()["detail"]
    assert detail["error"] == "AI returned invalid JSON"
    assert detail["raw"] == "not json at all"


def test_ai_plan_endpoint_incomplete_plan(use_fake_openai) -> None:
    use_fake_openai(json.dumps({"playlistName": "Only Name"}))

    response = client.post("/api/ai/plan", json={"prompt": "rainy synthwave"})
    assert response.status_code == 500

    detail = response.json()["detail"]
    assert detail["error"] == "AI returned incomplete plan"
    assert detail["plan"] == {"playlistName": "Only Name"}


def test_ai_plan_endpoint_upstream_failure(monkeypatch, use_fake_openai, good_plan) -> None:
    fake = use_fake_openai(json.dumps(good_plan))

    def boom(**kwargs):
        raise OpenAIError("connection reset")

    monkeypatch.setattr(fake.completions, "create", boom)

    response = client.post("/api/ai/plan", json={"prompt": "rainy synthwave"})
    assert response.status_code == 502


def test_debug_env_reports_key_presence(monkeypatch) -> None:
    monkeypatch.setattr("vibeset.api.debug.routes.OPENAI_API_KEY", "sk-test")
    response = client.get("/api/debug/env")
    assert response.status_code == 200
    assert response.json() == {"hasOpenAIKey": True}

    monkeypatch.setattr("vibeset.api.debug.routes.OPENAI_API_KEY", None)
    assert client.get("/api/debug/env").json() == {"hasOpenAIKey": False}
