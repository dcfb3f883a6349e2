"""Pytest configuration and fixtures."""

import json

import pytest
from fastapi.testclient import TestClient

from strength_level.data.threshold_loader import load_threshold_table
from strength_level.models.strength import ThresholdTable
from strength_level.web import create_app

SAMPLE_THRESHOLDS = {
    "Squat": {
        "M": {"Beginner": 1.0, "Intermediate": 1.5, "Advanced": 2.0, "Elite": 2.5},
        "F": {"Beginner": 0.5, "Intermediate": 1.0, "Advanced": 1.5, "Elite": 2.0},
    },
    "Bench": {
        "M": {"Beginner": 0.5, "Intermediate": 1.0, "Advanced": 1.5, "Elite": 2.0},
        "F": {"Beginner": 0.25, "Intermediate": 0.5, "Advanced": 0.75, "Elite": 1.25},
    },
    "Deadlift": {
        "M": {"Beginner": 1.0, "Intermediate": 1.5, "Advanced": 2.25, "Elite": 3.0},
        "F": {"Beginner": 0.5, "Intermediate": 1.0, "Advanced": 1.75, "Elite": 2.5},
    },
}


@pytest.fixture
def sample_thresholds():
    """Sample thresholds in the JSON shape."""
    return json.loads(json.dumps(SAMPLE_THRESHOLDS))


@pytest.fixture
def sample_thresholds_path(tmp_path, sample_thresholds):
    """Write the sample thresholds to a temporary JSON file."""
    path = tmp_path / "strength_levels.json"
    path.write_text(json.dumps(sample_thresholds))
    return path


@pytest.fixture
def sample_table(sample_thresholds_path) -> ThresholdTable:
    """Load the sample thresholds."""
    return load_threshold_table(sample_thresholds_path)


@pytest.fixture
def client(sample_thresholds_path):
    """Test client with the sample thresholds loaded."""
    with TestClient(create_app(thresholds_source=sample_thresholds_path)) as c:
        yield c


@pytest.fixture
def unloaded_client(tmp_path):
    """Test client whose threshold source does not exist."""
    with TestClient(create_app(thresholds_source=tmp_path / "missing.json")) as c:
        yield c
