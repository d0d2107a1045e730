import inspect
import json
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from pypdf import PdfReader

from stamplayout.api import watermark
from stamplayout.core.config import Settings
from stamplayout.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def layout_request(seed=11, **config):
    body = {"text": "DRAFT", "position": {"type": "random"}, "quantity": 4}
    body.update(config)
    return {"page": {"width": 612, "height": 792}, "config": body, "seed": seed}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_fonts(client):
    fonts = client.get("/watermark/fonts").json()["fonts"]
    assert "Helvetica-Bold" in fonts


def test_preview_is_reproducible_with_seed(client):
    first = client.post("/watermark/preview", json=layout_request()).json()
    second = client.post("/watermark/preview", json=layout_request()).json()

    assert first["layout"] == second["layout"]
    assert len(first["layout"]["watermarks"]) == 4
    assert first["summary"]["quantity"] == "4 watermarks"


def test_preview_with_every_variant(client):
    body = layout_request(
        position={"type": "template", "template": "grid", "rows": 2, "cols": 3},
        orientation={"type": "preset", "preset": "vertical"},
        font_size={"type": "recommended", "document_type": "legal"},
        color={"type": "palette", "palette": "custom", "colors": ["#ff0000", "00f"]},
    )
    response = client.post("/watermark/preview", json=body)
    assert response.status_code == 200

    watermarks = response.json()["layout"]["watermarks"]
    assert [w["angle"] for w in watermarks] == [90.0] * 4
    assert [w["color"] for w in watermarks] == ["#ff0000", "#0000ff", "#ff0000", "#0000ff"]


def test_preview_rejects_invalid_config(client):
    body = layout_request(quantity=0, position={"type": "fixed", "x": -5, "y": 10})
    response = client.post("/watermark/preview", json=body)

    assert response.status_code == 400
    assert len(response.json()["detail"]["errors"]) == 2


def test_preview_rejects_unknown_variant(client):
    body = layout_request(position={"type": "spiral"})
    assert client.post("/watermark/preview", json=body).status_code == 422


def test_validate_reports_overlaps(client):
    body = layout_request(position={"type": "fixed", "x": 100, "y": 100}, quantity=3)
    result = client.post("/watermark/validate", json=body).json()["result"]

    assert result["valid"] is True
    assert result["overlaps"] == [[0, 1], [0, 2], [1, 2]]


def test_validate_reports_errors(client):
    body = layout_request(font_size={"type": "fixed", "size": 300})
    result = client.post("/watermark/validate", json=body).json()["result"]

    assert result["valid"] is False
    assert result["errors"]


def test_apply_returns_stamped_pdf(client, sample_pdf):
    config = {"text": "SAMPLE", "position": {"type": "template", "template": "center"}}
    response = client.post(
        "/watermark/apply",
        files={"file": ("report.pdf", sample_pdf, "application/pdf")},
        data={"config": json.dumps(config), "seed": "5"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "report_wm.pdf" in response.headers["content-disposition"]
    assert len(PdfReader(BytesIO(response.content)).pages) == 2


def test_apply_rejects_non_pdf_upload(client):
    response = client.post(
        "/watermark/apply",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        data={"config": json.dumps({"text": "X"})},
    )
    assert response.status_code == 400


def test_apply_rejects_malformed_config(client, sample_pdf):
    response = client.post(
        "/watermark/apply",
        files={"file": ("report.pdf", sample_pdf, "application/pdf")},
        data={"config": json.dumps({"quantity": 2})},
    )
    assert response.status_code == 422


def test_apply_rejects_broken_pdf(client):
    response = client.post(
        "/watermark/apply",
        files={"file": ("broken.pdf", b"garbage", "application/pdf")},
        data={"config": json.dumps({"text": "X"})},
    )
    assert response.status_code == 422


def test_apply_enforces_upload_limit(client, monkeypatch):
    monkeypatch.setattr(watermark, "get_settings", lambda: Settings(max_upload_mb=1))
    oversized = b"%PDF-1.4\n" + b"0" * (1024 * 1024)
    response = client.post(
        "/watermark/apply",
        files={"file": ("big.pdf", oversized, "application/pdf")},
        data={"config": json.dumps({"text": "X"})},
    )
    assert response.status_code == 413


def test_apply_parses_the_upload_once(client, sample_pdf, monkeypatch):
    calls = []
    original_read = watermark.pdf_service.read

    def counting_read(data):
        calls.append(len(data))
        return original_read(data)

    monkeypatch.setattr(watermark.pdf_service, "read", counting_read)
    response = client.post(
        "/watermark/apply",
        files={"file": ("report.pdf", sample_pdf, "application/pdf")},
        data={"config": json.dumps({"text": "X"})},
    )

    assert response.status_code == 200
    assert calls == [len(sample_pdf)]


def test_apply_runs_outside_the_event_loop():
    assert not inspect.iscoroutinefunction(watermark.apply)
