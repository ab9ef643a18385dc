"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path
from typing import Dict, Any


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def player_json():
    """Small player record used across tests."""
    return '{"name":"Ava","score":42,"tags":["a","b"]}'


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """Document covering every JSON value kind."""
    return {
        "name": "Ava",
        "score": 42,
        "ratio": 2.5,
        "big": 2**40,
        "active": True,
        "nothing": None,
        "tags": ["a", "b"],
        "scores": [3, 1, 2],
        "ranks": {"z": 1, "a": 2, "m": 3},
        "player": {
            "name": "Bob",
            "score": 7,
            "joined": "2024-01-01T12:00:00"
        }
    }


@pytest.fixture
def sample_file(temp_dir, sample_document):
    """Write the sample document to a JSON file."""
    path = temp_dir / "response.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path
