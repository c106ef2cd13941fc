from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import api.main
from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_load_example(client, payload):
    resp = client.get("/api/load-upright-example")
    assert resp.status_code == 200
    assert resp.json() == payload


def test_calculate_upright(client, payload):
    resp = client.post("/api/calculate-upright", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["finalStatus"] == "PASS"
    assert body["swayCheck"]["permissibleSway"] == 46.0
    assert body["interactionCheck"]["status"] == "PASS"
    assert body["designAxialCapacity"] < body["yieldingCapacity"]
    assert len(body["calculationSteps"]) > 20


def test_out_of_range_value_is_422(client, payload):
    payload["sectionProperties"]["grossArea"] = 0
    resp = client.post("/api/calculate-upright", json=payload)
    assert resp.status_code == 422
    assert "grossArea" in resp.json()["detail"]


def test_missing_field_is_422(client, payload):
    del payload["appliedLoads"]["axialForce"]
    resp = client.post("/api/calculate-upright", json=payload)
    assert resp.status_code == 422


def test_generate_report(client, payload, monkeypatch):
    def fake_report(design_input, results, output_path, **kwargs):
        Path(output_path).write_bytes(b"%PDF-1.4 upright")
        return Path(output_path)

    monkeypatch.setattr(api.main, "generate_upright_report", fake_report)
    resp = client.post("/api/generate-report", json=payload)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.content.startswith(b"%PDF")
    assert "Upright_Design_Report.pdf" in resp.headers["content-disposition"]


def test_report_failure_is_500(client, payload, monkeypatch):
    def broken_report(*args, **kwargs):
        raise RuntimeError("pdflatex failed")

    monkeypatch.setattr(api.main, "generate_upright_report", broken_report)
    resp = client.post("/api/generate-report", json=payload)
    assert resp.status_code == 500
    assert "Report generation failed" in resp.json()["detail"]


def test_module_entry_point_serves_app(monkeypatch):
    import runpy

    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.delenv("HOST", raising=False)
    runpy.run_module("api.main", run_name="__main__")

    assert calls == [("api.main:app", {"host": "127.0.0.1", "port": 8123})]
