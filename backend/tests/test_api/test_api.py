"""Tests for API endpoints (simulated analysis runs with no delay)."""

from __future__ import annotations

import base64
import json

from fastapi.testclient import TestClient

from thetaforge.config import Settings
from thetaforge.dependencies import get_settings
from thetaforge.main import app
from thetaforge.samples import DEMO_TEXT
from tests.conftest import MASS_VOLUME_TEXT


app.dependency_overrides[get_settings] = lambda: Settings(simulated_analysis_delay_s=0.0)
client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["transforms_registered"] == 7


def test_taxonomy_and_demo():
    taxonomy = client.get("/api/taxonomy").json()
    assert "mass" in taxonomy["physics"]
    assert len(taxonomy) == 13

    demo = client.get("/api/demo").json()
    assert demo["text"] == DEMO_TEXT


def test_process_mass_volume():
    response = client.post("/api/process", json={"text": MASS_VOLUME_TEXT, "seed": 1})
    assert response.status_code == 200
    data = response.json()

    op = data["result"]["stage2"]["shard_0"]["operations"][0]
    assert op["type"] == "FUSION"
    assert op["universalBase"] == "MASS_ENERGY"
    assert data["result"]["stage3"]["nodes"]["shard_0"]["shape_role"] == "Structural Anchor"
    assert data["summary"]["segment_count"] == 1
    assert data["transforms_completed"] == 7
    assert data["transforms_failed"] == 0
    assert "THETAFORGE REPORT" in data["report_text"]


def test_process_is_reproducible_with_seed():
    body = {"text": DEMO_TEXT, "seed": 9}
    first = client.post("/api/process", json=body).json()
    second = client.post("/api/process", json=body).json()
    assert first["result"] == second["result"]


def test_process_empty_text():
    response = client.post("/api/process", json={"text": ""})
    assert response.status_code == 200
    data = response.json()
    assert data["result"]["stage1"] == {}
    assert data["result"]["stage3"] == {"nodes": {}, "system_resonance": 0.0}
    assert data["errors"] == {}


def test_process_skip():
    response = client.post("/api/process", json={"text": DEMO_TEXT, "skip": ["S4.01"]})
    data = response.json()
    assert data["transforms_completed"] == 6
    assert data["result"]["stage4"]["quantum_nodes"] == []


def test_process_skip_non_leaf_step():
    response = client.post("/api/process", json={"text": DEMO_TEXT, "skip": ["S3.01"]})
    assert response.status_code == 200
    data = response.json()
    assert data["transforms_completed"] == 3
    assert data["result"]["stage2"]
    assert data["result"]["stage3"]["nodes"] == {}
    assert data["result"]["stage4"]["quantum_nodes"] == []


def test_process_unknown_skip_id():
    response = client.post("/api/process", json={"text": DEMO_TEXT, "skip": ["S9.99"]})
    assert response.status_code == 400
    assert "S9.99" in response.json()["detail"]


def test_process_requires_text():
    response = client.post("/api/process", json={})
    assert response.status_code == 422


def test_process_stream():
    with client.stream("POST", "/api/process/stream", json={"text": DEMO_TEXT, "seed": 0}) as response:
        assert response.status_code == 200
        body = "".join(response.iter_text())

    events = [block for block in body.split("\n\n") if block.strip()]
    names = [block.split("\n", 1)[0].removeprefix("event: ") for block in events]
    assert names.count("progress") == 14
    assert names[-2:] == ["result", "done"]

    result_payload = json.loads(events[-2].split("data: ", 1)[1])
    assert result_payload["result"]["stage3"]["system_resonance"] == 89.6


def test_process_stream_reports_pipeline_failure():
    body_json = {"text": DEMO_TEXT, "skip": ["S9.99"]}
    with client.stream("POST", "/api/process/stream", json=body_json) as response:
        assert response.status_code == 200
        body = "".join(response.iter_text())

    events = [block for block in body.split("\n\n") if block.strip()]
    names = [block.split("\n", 1)[0].removeprefix("event: ") for block in events]
    assert names == ["error"]
    assert "S9.99" in json.loads(events[0].split("data: ", 1)[1])["message"]


def test_analyze_image():
    payload = base64.b64encode(b"\x89PNG\r\n\x1a\nfake").decode()
    response = client.post(
        "/api/analyze-image",
        json={"image_base64": f"data:image/png;base64,{payload}", "mime_type": "image/png"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["description"].startswith("[SIMULATION MODE]")
    assert data["summary"]["segment_count"] > 0
    assert data["result"]["stage1"]


def test_analyze_image_rejects_bad_base64():
    response = client.post("/api/analyze-image", json={"image_base64": "not base64!!"})
    assert response.status_code == 400
