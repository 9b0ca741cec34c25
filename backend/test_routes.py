"""HTTP routes through FastAPI's test client"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import ProgrammingError

from unoform.api import routes
from unoform.db import session as session_module
from unoform.generation import GenerationError
from unoform.styles import get_style

app = FastAPI()
app.include_router(routes.router)
client = TestClient(app)

CLASSIC = get_style("classic").validation

PROMPT_BODY = {
    "style": "classic",
    "material": {"type": "wood", "name": "walnut"},
    "details": ["decorative curved handles", "dark granite countertop"],
    "mood": {"lighting": "natural", "atmosphere": "warm"},
    "model_type": "canny-pro",
    "seed": 11,
}


def test_list_styles():
    response = client.get("/styles")
    ids = [style["id"] for style in response.json()]
    assert ids == ["classic", "copenhagen", "shaker", "avantgarde"]


def test_style_detail_serializes_enums():
    body = client.get("/styles/classic").json()
    assert body["id"] == "classic"
    assert len(body["validation"]["must_have"]) == 6
    assert body["validation"]["must_have"][0]["category"] == "mustHave"


def test_unknown_style_returns_error():
    assert client.get("/styles/rococo").json() == {"error": "Style 'rococo' not found"}
    assert "error" in client.get("/styles/rococo/checklist").json()


def test_checklist_starts_unchecked():
    body = client.get("/styles/copenhagen/checklist").json()
    items = [item for group in body["checklist"].values() for item in group]
    assert len(items) == 12
    assert not any(item["checked"] for item in items)
    assert body["quick_tips"]


def test_build_prompt_is_seeded():
    first = client.post("/prompt", json=PROMPT_BODY).json()
    second = client.post("/prompt", json=PROMPT_BODY).json()

    assert first["status"] == "success"
    assert first["prompt"] == second["prompt"]
    assert "dark granite countertop" in first["prompt"]
    assert "decorative curved handles" not in first["prompt"]
    assert [layer["layer"] for layer in first["layers"]] == [1, 2, 3, 4, 5]


def test_invalid_style_is_rejected():
    response = client.post("/prompt", json={**PROMPT_BODY, "style": "rococo"})
    assert response.status_code == 422


def test_template_prompt():
    body = {**PROMPT_BODY, "style": "shaker", "material": {"type": "paint", "name": "sage green"}, "detailed": False}
    result = client.post("/prompt/template", json=body).json()
    assert "{" not in result["prompt"]
    assert "sage green" in result["prompt"]


def test_enhance_prompt():
    result = client.post("/prompt/enhance", json={"prompt": "oak kitchen", "style": "avantgarde", "model_type": "flux-pro"}).json()
    assert result["status"] == "success"
    assert result["original"] == "oak kitchen"
    assert "16:9 wide kitchen interior format" in result["enhanced"]


def test_validate_is_stateless_between_requests():
    full = [r.description for r in CLASSIC.must_have + CLASSIC.should_have]
    assert client.post("/validate", json={"style": "classic", "checked_items": full}).json()["score"] == 100

    empty = client.post("/validate", json={"style": "classic"}).json()
    assert empty["score"] == 0
    assert empty["is_valid"] is False
    assert len(empty["missing_elements"]) == 6


def test_validate_batch():
    full = [r.description for r in CLASSIC.must_have + CLASSIC.should_have]
    body = {"images": [
        {"url": "a.png", "style": "classic", "checked_items": full},
        {"url": "b.png", "style": "classic", "checked_items": []},
    ]}
    result = client.post("/validate/batch", json=body).json()

    assert result["statistics"]["average_score"] == 50.0
    assert result["statistics"]["pass_rate"] == 0.5
    assert result["results"]["b.png"]["score"] == 0


def test_validation_report():
    result = client.post("/validate/report", json={"style": "shaker", "checked_items": []}).json()
    assert result["report"].startswith("# Unoform Shaker Style Validation Report")
    assert result["validation"]["score"] == 0


class FakeGenerationClient:
    def __init__(self, api_key="key", output=None, error=None):
        self.api_key = api_key
        self.output = output
        self.error = error
        self.calls = []

    def generate(self, model_type, prompt, image_url, guidance=None, steps=None):
        self.calls.append((model_type, prompt, image_url, guidance, steps))
        if self.error:
            raise self.error
        return self.output


@pytest.fixture
def logged(monkeypatch):
    rows = []
    monkeypatch.setattr(routes, "record_generation", lambda **fields: rows.append(fields))
    return rows


def test_generate_success_is_logged(monkeypatch, logged):
    fake = FakeGenerationClient(output=["https://out/1.png"])
    monkeypatch.setattr(routes, "get_generation_client", lambda: fake)

    result = client.post("/generate", json={
        "prompt": "Classic kitchen", "image_url": "https://img/1.png", "style": "classic",
    }).json()

    assert result["status"] == "success"
    assert result["output"] == ["https://out/1.png"]
    assert result["model"] == "FLUX Canny Pro"
    assert fake.calls[0][:3] == ("canny-pro", "Classic kitchen", "https://img/1.png")
    assert logged[0]["succeeded"] is True
    assert logged[0]["output"] == '["https://out/1.png"]'


def test_generate_failure_is_reported(monkeypatch, logged):
    fake = FakeGenerationClient(error=GenerationError("Generation failed: boom", 500))
    monkeypatch.setattr(routes, "get_generation_client", lambda: fake)

    result = client.post("/generate", json={"prompt": "x", "model_type": "flux-pro"}).json()

    assert result["status"] == "error"
    assert result["status_code"] == 500
    assert logged[0]["succeeded"] is False
    assert logged[0]["error"] == "Generation failed: boom"


def test_generate_requires_api_key(monkeypatch, logged):
    monkeypatch.setattr(routes, "get_generation_client", lambda: FakeGenerationClient(api_key=""))
    result = client.post("/generate", json={"prompt": "x", "model_type": "flux-pro"}).json()

    assert result["status"] == "error"
    assert logged == []


def test_canny_requires_image(logged):
    result = client.post("/generate", json={"prompt": "x", "model_type": "canny-pro"}).json()
    assert result == {"status": "error", "message": "canny-pro requires an image_url"}


class BrokenSession:
    """Session whose commit fails the way a missing table does on a real server"""

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def add(self, row):
        pass

    def commit(self):
        raise ProgrammingError(
            "INSERT INTO generation_logs", {}, Exception('relation "generation_logs" does not exist')
        )


def test_generation_result_survives_database_errors(monkeypatch):
    monkeypatch.setattr(routes, "get_generation_client", lambda: FakeGenerationClient(output="https://out/1.png"))
    monkeypatch.setattr(session_module, "SessionLocal", BrokenSession)

    response = client.post("/generate", json={"prompt": "x", "model_type": "flux-pro"})

    assert response.status_code == 200
    assert response.json()["status"] == "success"
    assert response.json()["output"] == "https://out/1.png"
