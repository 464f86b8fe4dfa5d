"""Tests for the HTTP API in api/main.py and api/routes/."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import app
from config import settings


@pytest.fixture
def client() -> TestClient:
    """Return a test client for the API."""
    return TestClient(app)


class TestCompareEndpoint:
    """Tests for POST /api/compare."""

    def test_compare_relaxed_texts(self, client):
        """Relaxed buffers are compared and absent sides omitted."""
        response = client.post("/api/compare", json={
            "left": "{a: 1, b: 2,}",
            "right": "{a: 1, b: 3, c: null}",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["is_identical"] is False
        assert data["change_count"] == 2
        assert data["changes"][0] == {
            "path": "b",
            "path_keys": ["b"],
            "change_type": "value_change",
            "old_value": 2,
            "new_value": 3,
        }
        assert data["changes"][1] == {
            "path": "c",
            "path_keys": ["c"],
            "change_type": "added",
            "new_value": None,
        }

    def test_compare_identical(self, client):
        """Identical documents report no changes."""
        response = client.post("/api/compare", json={"left": "[1, 2]", "right": "[1, 2,]"})
        assert response.status_code == 200
        assert response.json()["is_identical"] is True
        assert response.json()["changes"] == []

    def test_compare_inline_diff(self, client):
        """inline_diff attaches word-level segments."""
        response = client.post("/api/compare", json={
            "left": '{"s": "hello world"}',
            "right": '{"s": "hello there"}',
            "inline_diff": True,
        })
        change = response.json()["changes"][0]
        assert change["inline_diff"]["segments"][0] == {"op": "equal", "text": "hello "}

    def test_compare_invalid_side(self, client):
        """A side that fails to parse yields a 400 with its diagnostic."""
        response = client.post("/api/compare", json={"left": '{"a": 1}', "right": '{"a": }'})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["message"] == "Invalid JSON in right input"
        assert detail["left"] is None
        assert detail["right"]["line"] == 1
        assert detail["right"]["column"] == 7

    def test_compare_both_empty(self, client):
        """Both empty sides are named in the message."""
        response = client.post("/api/compare", json={"left": "", "right": "  "})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["message"] == "Invalid JSON in left and right input"
        assert detail["left"]["message"] == "input is empty"

    def test_compare_rejects_nan(self, client):
        """NaN is a syntax error, not a silently nulled value."""
        response = client.post("/api/compare", json={"left": '{"a": NaN}', "right": "{}"})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["message"] == "Invalid JSON in left input"
        assert detail["left"]["message"] == "Invalid number NaN"
        assert detail["left"]["column"] == 7

    def test_compare_rejects_lone_surrogate(self, client):
        """An unpaired surrogate escape is reported instead of failing the response."""
        response = client.post("/api/compare", json={"left": '{"a": "\\ud800"}', "right": "{}"})
        assert response.status_code == 400
        assert response.json()["detail"]["left"]["message"] == "Unpaired surrogate in string"


class TestCompareFilesEndpoint:
    """Tests for POST /api/compare/files."""

    def test_compare_files(self, client):
        """Uploaded files are compared and a report is returned."""
        response = client.post("/api/compare/files", files={
            "before_file": ("before.json", b'{"a": 1, // old\n}', "application/json"),
            "after_file": ("after.json", b'{"a": 2}', "application/json"),
        })
        assert response.status_code == 200
        data = response.json()
        assert data["before_file"] == "before.json"
        assert data["change_count"] == 1
        assert "RESULT: 1 DIFFERENCE(S) FOUND" in data["report"]

    def test_rejects_non_json_name(self, client):
        """Files without a JSON suffix are refused."""
        response = client.post("/api/compare/files", files={
            "before_file": ("before.txt", b"{}", "text/plain"),
            "after_file": ("after.json", b"{}", "application/json"),
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "Before file must be JSON"

    def test_rejects_invalid_content(self, client):
        """Syntax errors in an upload come back with a diagnostic."""
        response = client.post("/api/compare/files", files={
            "before_file": ("before.json", b"{}", "application/json"),
            "after_file": ("after.json", b"{\n  \"a\": }", "application/json"),
        })
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["message"] == "Invalid JSON in after file"
        assert detail["diagnostic"]["line"] == 2

    def test_rejects_nan_upload(self, client):
        """A NaN literal in an upload is a 400, not a server error."""
        response = client.post("/api/compare/files", files={
            "before_file": ("before.json", b"{}", "application/json"),
            "after_file": ("after.json", b'{"a": NaN}', "application/json"),
        })
        assert response.status_code == 400
        assert response.json()["detail"]["diagnostic"]["message"] == "Invalid number NaN"


class TestInlineDiffEndpoint:
    """Tests for POST /api/compare/inline-diff."""

    def test_inline_diff(self, client):
        """Query values are diffed word by word."""
        response = client.post("/api/compare/inline-diff", params={"old_value": "a b", "new_value": "a c"})
        assert response.status_code == 200
        assert response.json()["old_html"] == "a <span class='hl-removed'>b</span>"


class TestFormatEndpoints:
    """Tests for /api/format routes."""

    def test_format(self, client):
        """Relaxed text is formatted with two-space indentation."""
        response = client.post("/api/format", json={"text": "{a: 1,}"})
        assert response.status_code == 200
        assert response.json() == {"formatted": '{\n  "a": 1\n}'}

    def test_format_invalid(self, client):
        """Invalid text yields a 400 with the diagnostic."""
        response = client.post("/api/format", json={"text": '{"a": }'})
        assert response.status_code == 400
        assert response.json()["detail"]["caret_offset"] == 9

    def test_format_lone_surrogate(self, client):
        """An unpaired surrogate escape yields a 400 with its position."""
        response = client.post("/api/format", json={"text": '{"a": "\\ud800"}'})
        assert response.status_code == 400
        assert response.json()["detail"]["column"] == 8

    def test_validate_valid(self, client):
        """Valid text reports valid with no diagnostic."""
        response = client.post("/api/format/validate", json={"text": "{a: 1}"})
        assert response.json() == {"valid": True, "diagnostic": None}

    def test_validate_empty(self, client):
        """Empty text is reported, still with a 200."""
        response = client.post("/api/format/validate", json={"text": ""})
        assert response.status_code == 200
        assert response.json()["diagnostic"]["message"] == "input is empty"

    def test_clean(self, client):
        """The cleanup is applied without parsing."""
        response = client.post("/api/format/clean", json={"text": "{foo: 1, /* x */}"})
        assert response.json() == {"cleaned": '{"foo": 1 }'}


class TestApplication:
    """Tests for app-level behaviour."""

    def test_health(self, client):
        """The health endpoint reports the app name."""
        response = client.get("/health")
        assert response.json()["status"] == "healthy"
        assert response.json()["app"] == settings.APP_NAME

    def test_security_headers(self, client):
        """Responses carry security headers."""
        response = client.get("/health")
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_request_size_limit(self, client, monkeypatch):
        """Bodies over MAX_REQUEST_SIZE are refused."""
        monkeypatch.setattr(settings, "MAX_REQUEST_SIZE", 10)
        response = client.post("/api/format", json={"text": "{a: 1, b: 2, c: 3}"})
        assert response.status_code == 413
