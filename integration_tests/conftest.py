"""Pytest configuration for integration tests."""

import pytest
from fastapi.testclient import TestClient

from strength_level.web import create_app


def pytest_collection_modifyitems(items):
    """Mark every test in this directory as an integration test."""
    for item in items:
        if "integration_tests" in str(item.path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def packaged_client():
    """Test client serving the packaged threshold table."""
    with TestClient(create_app()) as client:
        yield client
