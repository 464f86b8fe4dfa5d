"""Pytest configuration and shared fixtures for JSON Diff Pro tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest


RELAXED_CONFIG = """// service configuration
{
    name: "api",          // bare key
    'port': 8080,
    "hosts": ["a", "b",], /* trailing comma */
    "url": "http://example.com/path",
}
"""


@pytest.fixture
def relaxed_config() -> str:
    """Return a hand-edited config with comments, bare keys and trailing commas."""
    return RELAXED_CONFIG


@pytest.fixture
def original_doc() -> dict[str, Any]:
    """Return the original side of a comparison."""
    return {
        "name": "api",
        "version": 1,
        "tags": ["web", "public"],
        "owner": {"team": "core", "oncall": "alice"},
        "legacy": True,
    }


@pytest.fixture
def modified_doc() -> dict[str, Any]:
    """Return the modified side of a comparison."""
    return {
        "name": "api",
        "version": "2",
        "tags": ["web", "internal", "beta"],
        "owner": {"team": "platform", "oncall": "alice"},
        "region": "eu-west-1",
    }


@pytest.fixture
def write_file(tmp_path):
    """Return a helper writing text to a file under tmp_path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
