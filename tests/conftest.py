"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from cob_scheduler.api.main import app
from cob_scheduler.config import Settings, get_settings


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "api: marks tests that exercise the HTTP layer (deselect with '-m \"not api\"')"
    )


@pytest.fixture
def roster():
    return ["Alice", "Bob", "Charlie"]


@pytest.fixture
def settings(tmp_path):
    """Settings pointing the schedule store at a temporary directory."""
    return Settings(schedules_dir=tmp_path / "schedules")


@pytest.fixture
def client(settings):
    """API test client using the temporary settings."""
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
