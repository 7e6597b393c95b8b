"""Tests for the HTTP routes."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from plagiasure.config import DETECTION_METHOD, JWT_ALGORITHM, JWT_SECRET_KEY
from plagiasure.dependencies.auth import verify_token
from plagiasure.dependencies.providers import get_providers
from plagiasure.main import app, run
from plagiasure.schemas.plagiarism_schemas import Highlight, ProviderResult
from plagiasure.schemas.report_schemas import AIDetectionResult

TEXT = "The mitochondria is the powerhouse of the cell and produces most of its ATP."


class StubProvider:
    def __init__(self, name, score, highlights=()):
        self.name = name
        self.result = ProviderResult(provider=name, score=score, highlights=list(highlights))

    def check(self, text):
        return self.result


@pytest.fixture
def providers():
    return [
        StubProvider("crossref", 0.45, [Highlight(text=TEXT, source="https://doi.org/10.1/cell", score=0.45)]),
        StubProvider("google", 0.0),
    ]


@pytest.fixture
def client(providers):
    app.dependency_overrides[get_providers] = lambda: providers
    app.dependency_overrides[verify_token] = lambda: {"sub": "user-1"}
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self):
        assert TestClient(app).get("/health").json() == {"status": "ok"}


class TestDetectRoute:
    def test_detect(self, client):
        r = client.post("/plagiarism/detect", json={"text": TEXT})
        assert r.status_code == 200
        body = r.json()
        assert body["score"] == 0.45
        assert body["method"] == DETECTION_METHOD
        assert body["sources"] == ["https://doi.org/10.1/cell"]
        assert body["highlights"][0]["extra"]["kind"] == "generic"
        assert body["probes"] == []

    def test_include_probes(self, client):
        body = client.post("/plagiarism/detect?include_probes=true", json={"text": TEXT}).json()
        assert {p["kind"] for p in body["probes"]} >= {"sentence", "chunk"}

    def test_blank_text_rejected(self, client):
        r = client.post("/plagiarism/detect", json={"text": "   "})
        assert r.status_code == 400

    def test_requires_token(self, providers):
        app.dependency_overrides[get_providers] = lambda: providers
        try:
            r = TestClient(app).post("/plagiarism/detect", json={"text": TEXT})
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 401

    def test_rejects_bad_token(self, providers):
        app.dependency_overrides[get_providers] = lambda: providers
        try:
            r = TestClient(app).post(
                "/plagiarism/detect",
                json={"text": TEXT},
                headers={"Authorization": "Bearer not-a-jwt"},
            )
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 401

    def test_accepts_signed_token(self, providers):
        token = jwt.encode({"sub": "user-42", "aud": "authenticated"}, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)
        app.dependency_overrides[get_providers] = lambda: providers
        try:
            r = TestClient(app).post(
                "/plagiarism/detect",
                json={"text": TEXT},
                headers={"Authorization": f"Bearer {token}"},
            )
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 200


class TestAnalyzeRoute:
    def test_verdict_combines_both_scores(self, client):
        ai = AIDetectionResult(probability=0.82, label="AI", available=True)
        with patch("plagiasure.routers.reports.detect_ai_probability", return_value=ai):
            r = client.post("/reports/analyze", json={"text": TEXT})

        assert r.status_code == 200
        body = r.json()
        assert body["verdict"] == "High AI probability with significant plagiarism detected"
        assert body["ai_risk"]["level"] == "HIGH"
        assert body["plagiarism_risk"]["level"] == "MEDIUM"
        assert body["plagiarism"]["score"] == 0.45
        assert body["word_count"] == len(TEXT.split())

    def test_ai_failure_still_reports(self, client):
        with patch("plagiasure.routers.reports.detect_ai_probability", side_effect=RuntimeError("down")):
            body = client.post("/reports/analyze", json={"text": TEXT}).json()

        assert body["ai_available"] is False
        assert body["ai_probability"] == 0
        assert body["verdict"] == "Plagiarism detected"


class TestServerEntryPoint:
    def test_run_serves_app_with_uvicorn(self):
        with patch("uvicorn.run") as serve:
            run(host="127.0.0.1", port=9001)
        serve.assert_called_once_with(app, host="127.0.0.1", port=9001, log_level="info")
