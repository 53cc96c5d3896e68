"""Tests for API endpoints (model and image services stubbed)."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from gardenplan.config import Settings
from gardenplan.dependencies import get_settings
from gardenplan.imaging import watercolor as imaging
from gardenplan.llm import client as llm_client
from gardenplan.main import app
from tests.conftest import (
    HOSTA_AND_SPRUCE,
    ORIGIN_RECT_OUTLINE,
    RECT_OUTLINE,
    SEVEN_PLANTS,
    SVG_NS,
    parse_svg,
)

client = TestClient(app)

PLAN_JSON = json.dumps({
    "overview": "A layered shade bed.",
    "plants": HOSTA_AND_SPRUCE,
    "layout": "Spruce at the back, hostas along the front.",
    "tips": ["Water weekly"],
})


def _settings(**overrides) -> Settings:
    values = {"anthropic_api_key": "", "gemini_api_key": ""}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def configured():
    app.dependency_overrides[get_settings] = lambda: _settings(
        anthropic_api_key="test", gemini_api_key="test",
    )
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured():
    app.dependency_overrides[get_settings] = lambda: _settings()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def fake_model(monkeypatch):
    async def fake(prompt, photo, config=None):
        return PLAN_JSON

    monkeypatch.setattr(llm_client, "get_plan_response", fake)


def _plan_body(image: str) -> dict:
    return {
        "image": image,
        "outlinePoints": ORIGIN_RECT_OUTLINE,
        "sunExposure": "partial-sun",
        "theme": "shade-loving",
    }


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------

def test_health(configured):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["llm_configured"] is True


def test_health_unconfigured(unconfigured):
    data = client.get("/api/health").json()
    assert data["llm_configured"] is False
    assert data["image_generation_configured"] is False


def test_options():
    data = client.get("/api/options").json()
    assert [c["value"] for c in data["sun_exposure"]] == ["full-sun", "partial-sun", "mostly-shade"]
    assert len(data["theme"]) == 5


# ---------------------------------------------------------------------------
# Diagram
# ---------------------------------------------------------------------------

def test_diagram():
    response = client.post("/api/diagram", json={
        "outlinePoints": RECT_OUTLINE, "plants": SEVEN_PLANTS, "seed": 5,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["type"] == "svg"
    root = parse_svg(data["diagram"])
    assert root.get("width") == "200"
    assert len(root.findall(".//svg:g[@class='plant']", SVG_NS)) == 7


def test_diagram_seed_is_reproducible():
    body = {"outline_points": RECT_OUTLINE, "plants": SEVEN_PLANTS, "seed": 9}
    first = client.post("/api/diagram", json=body).json()["diagram"]
    second = client.post("/api/diagram", json=body).json()["diagram"]
    assert first == second


def test_diagram_without_plants():
    response = client.post("/api/diagram", json={"outlinePoints": RECT_OUTLINE})
    assert response.status_code == 200
    root = parse_svg(response.json()["diagram"])
    assert root.find("svg:g[@class='legend']", SVG_NS) is None


def test_diagram_rejects_short_outline():
    response = client.post("/api/diagram", json={
        "outlinePoints": RECT_OUTLINE[:2], "plants": HOSTA_AND_SPRUCE,
    })
    assert response.status_code == 422


def test_diagram_rejects_non_numeric_point():
    outline = RECT_OUTLINE[:3] + [{"x": "left", "y": 4}]
    response = client.post("/api/diagram", json={"outlinePoints": outline})
    assert response.status_code == 422


def test_diagram_requires_post():
    assert client.get("/api/diagram").status_code == 405


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------

def test_plan(configured, fake_model, photo_data_url):
    response = client.post("/api/plan", json=_plan_body(photo_data_url))
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    rec = data["recommendation"]
    assert [p["name"] for p in rec["plants"]] == ["Hosta", "Spruce"]
    assert rec["plants"][1]["type"] == "tree"


def test_plan_unparseable_answer_falls_back(configured, monkeypatch, photo_data_url):
    async def fake(prompt, photo, config=None):
        return "I love this yard!"

    monkeypatch.setattr(llm_client, "get_plan_response", fake)
    data = client.post("/api/plan", json=_plan_body(photo_data_url)).json()
    assert data["recommendation"]["overview"].startswith("I love this yard!")
    assert len(data["recommendation"]["plants"]) == 3


def test_plan_without_api_key(unconfigured, photo_data_url):
    response = client.post("/api/plan", json=_plan_body(photo_data_url))
    assert response.status_code == 500
    assert response.json()["detail"]["error"] == "API key not configured"


def test_plan_model_failure(configured, monkeypatch, photo_data_url):
    async def broken(prompt, photo, config=None):
        raise RuntimeError("upstream timeout")

    monkeypatch.setattr(llm_client, "get_plan_response", broken)
    response = client.post("/api/plan", json=_plan_body(photo_data_url))
    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail["error"].startswith("Failed to generate garden plan")
    assert detail["details"] == "upstream timeout"


def test_plan_bad_photo(configured, fake_model):
    response = client.post("/api/plan", json=_plan_body("data:image/jpeg;base64,bm90IGFuIGltYWdl"))
    assert response.status_code == 400


def test_plan_missing_answers(configured, photo_data_url):
    body = _plan_body(photo_data_url)
    del body["theme"]
    assert client.post("/api/plan", json=body).status_code == 422


def test_plan_visualized(configured, fake_model, monkeypatch, photo_data_url):
    async def fake_transform(prompt, photo, client=None, config=None):
        assert "Spruce (back)" in prompt
        return "V0FURVJDT0xPUg=="

    monkeypatch.setattr(imaging, "transform_photo", fake_transform)
    response = client.post("/api/plan/visualized", json=_plan_body(photo_data_url))
    assert response.status_code == 200
    visuals = response.json()["visualizations"]
    assert visuals["watercolor"] == "V0FURVJDT0xPUg=="
    root = parse_svg(visuals["birdEye"])
    assert len(root.findall(".//svg:g[@class='plant']", SVG_NS)) == 2
    assert visuals["note"]


def test_plan_visualized_survives_watercolor_failure(configured, fake_model, monkeypatch, photo_data_url):
    async def failing(prompt, photo, client=None, config=None):
        raise imaging.ImageGenerationError("Image API error: 500")

    monkeypatch.setattr(imaging, "transform_photo", failing)
    response = client.post("/api/plan/visualized", json=_plan_body(photo_data_url))
    assert response.status_code == 200
    data = response.json()
    assert data["visualizations"]["watercolor"] is None
    assert data["visualizations"]["birdEye"].startswith("<svg")
    assert len(data["recommendation"]["plants"]) == 2


# ---------------------------------------------------------------------------
# Watercolor
# ---------------------------------------------------------------------------

def test_watercolor(configured, monkeypatch):
    seen = {}

    async def fake_generate(prompt, client=None, config=None):
        seen["prompt"] = prompt
        return "UE5H"

    monkeypatch.setattr(imaging, "generate_watercolor", fake_generate)
    response = client.post("/api/watercolor", json={
        "plants": SEVEN_PLANTS, "sunExposure": "full-sun", "theme": "colors-galore",
    })
    assert response.status_code == 200
    data = response.json()
    assert data == {"success": True, "image": "UE5H", "type": "png", "error": None, "note": None}
    assert "vibrant rainbow garden" in seen["prompt"]


def test_watercolor_failure_is_not_an_http_error(unconfigured):
    response = client.post("/api/watercolor", json={"plants": HOSTA_AND_SPRUCE})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert "GEMINI_API_KEY" in data["error"]
    assert data["note"] == "Watercolor generation failed - your plant plan is still complete!"
