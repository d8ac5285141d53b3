# ===============================================
# tests/test_endpoints.py
# HTTP contract of the gateway with a fake client.
# ===============================================
from fastapi.testclient import TestClient

from promptgenie.app import create_app
from promptgenie.generate import PromptGenerator, ProviderError
from fakes import RecordingClient, FailingClient, SilentError, NonTextClient

PARAMS = {"tone": "friendly", "complexity": "basic", "format": "concise", "examples": "none", "constraints": "minimal"}


def make_client(model_client):
    return TestClient(create_app(PromptGenerator(model_client=model_client)))


def test_generate_ok():
    fake = RecordingClient(text="You are Mailbot.\n")
    r = make_client(fake).post("/api/generate", json={"prompt": "Summarize emails", "parameters": PARAMS})

    assert r.status_code == 200
    assert r.json() == {"completion": "You are Mailbot.\n"}
    sent = fake.calls[0][0][0].content
    assert "Summarize emails" in sent
    assert "Use a friendly tone" in sent


def test_missing_prompt_is_400():
    fake = RecordingClient()
    client = make_client(fake)
    for body in ({"parameters": PARAMS}, {"prompt": "", "parameters": PARAMS}, {"prompt": "   ", "parameters": PARAMS}):
        r = client.post("/api/generate", json=body)
        assert r.status_code == 400
        assert r.json() == {"error": "Prompt is required", "status": 400}
    assert fake.calls == []


def test_invalid_parameters_are_400_with_violations():
    fake = RecordingClient()
    r = make_client(fake).post("/api/generate", json={"prompt": "hi", "parameters": {**PARAMS, "examples": "lots"}})

    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "Invalid parameters"
    assert body["status"] == 400
    assert body["violations"] == ["examples: must be one of none, few, many"]
    assert fake.calls == []


def test_malformed_body_is_400():
    client = make_client(RecordingClient())
    r = client.post("/api/generate", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["status"] == 400

    r = client.post("/api/generate", json=["prompt"])
    assert r.status_code == 400


def test_upstream_failure_is_500():
    client = make_client(FailingClient(ProviderError("Gemini", message="quota exceeded")))
    r = client.post("/api/generate", json={"prompt": "hi", "parameters": PARAMS})

    assert r.status_code == 500
    assert r.json() == {"error": "quota exceeded", "status": 500}


def test_upstream_failure_without_message_uses_fallback():
    client = make_client(FailingClient(SilentError()))
    r = client.post("/api/generate", json={"prompt": "hi", "parameters": PARAMS})

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to generate prompt", "status": 500}


def test_non_text_model_output_is_500_json():
    for value in (123, None):
        client = make_client(NonTextClient(value))
        r = client.post("/api/generate", json={"prompt": "hi", "parameters": PARAMS})

        assert r.status_code == 500
        assert r.json() == {"error": "Model returned no text", "status": 500}


def test_options_lists_values_and_defaults():
    r = make_client(RecordingClient()).get("/api/options")
    assert r.status_code == 200
    data = r.json()
    assert data["options"]["tone"] == ["professional", "friendly", "technical", "casual"]
    assert data["options"]["examples"] == ["none", "few", "many"]
    assert data["defaults"] == {
        "tone": "professional",
        "complexity": "intermediate",
        "format": "detailed",
        "examples": "few",
        "constraints": "moderate",
    }


def test_root_ok():
    r = make_client(RecordingClient()).get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_health_ok():
    r = make_client(RecordingClient()).get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_healthz_reports_engine():
    r = make_client(RecordingClient()).get("/healthz")
    assert r.status_code == 200
    assert r.json()["engine"] == "RecordingClient"
    assert r.json()["model"] == "fake-model"


def test_default_app_starts_without_credentials():
    # module-level app is built from settings; no key must not break import
    from promptgenie.app import app

    r = TestClient(app).get("/health")
    assert r.status_code == 200
