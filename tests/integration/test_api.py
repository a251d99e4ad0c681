"""Integration tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from regex_align.api import app as app_module
from regex_align.config import ConfigurationManager
from regex_align.pipeline import AlignmentPipeline


@pytest.fixture
def client():
    """Test client with a pipeline holding known templates."""
    manager = ConfigurationManager()
    manager.load({"align.by.regex.templates": {"assign": "="}})
    previous = app_module.get_pipeline()
    app_module.set_pipeline(AlignmentPipeline(config_manager=manager))
    yield TestClient(app_module.app)
    app_module.set_pipeline(previous)


class TestAlignEndpoint:
    """Tests for POST /api/align."""

    def test_align_lines(self, client):
        response = client.post(
            "/api/align", json={"lines": ["a=1", "bb=22", "c=333"], "pattern": "="}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["lines"] == ["a  =1", "bb =22", "c  =333"]
        assert data["columns"] == 1
        assert "block" not in data

    def test_align_text_with_crlf(self, client):
        response = client.post(
            "/api/align",
            json={"text": "a=1\r\nbb=2", "pattern": "assign", "eol": "CRLF"},
        )

        assert response.status_code == 200
        assert response.json()["text"] == "a  =1\r\nbb =2"

    def test_gutter_override(self, client):
        response = client.post(
            "/api/align", json={"lines": ["a=1", "bb=2"], "pattern": "=", "gutter": 0}
        )

        assert response.json()["lines"] == ["a =1", "bb=2"]

    def test_include_parts(self, client):
        response = client.post(
            "/api/align",
            json={"lines": ["a=1"], "pattern": "=", "start_line": 9, "include_parts": True},
        )

        block = response.json()["block"]
        assert block["lines"][0]["number"] == 9
        assert block["eol"] == "LF"

    def test_invalid_pattern(self, client):
        response = client.post("/api/align", json={"lines": ["a=1"], "pattern": "(="})

        assert response.status_code == 422
        assert response.json()["detail"]["error_type"] == "PatternError"

    def test_missing_lines_and_text(self, client):
        response = client.post("/api/align", json={"pattern": "="})

        assert response.status_code == 400

    def test_unknown_eol(self, client):
        response = client.post(
            "/api/align", json={"lines": ["a=1"], "pattern": "=", "eol": "NEL"}
        )

        assert response.status_code == 400


class TestInfoEndpoints:
    """Tests for the read-only endpoints."""

    def test_templates(self, client):
        response = client.get("/api/templates")

        assert response.json() == {"templates": {"assign": "="}}

    def test_stats(self, client):
        client.post("/api/align", json={"lines": ["a=1"], "pattern": "="})

        response = client.get("/api/stats")

        assert response.json()["total_executions"] == 1
