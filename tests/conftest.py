"""Pytest configuration and fixtures."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.config import Settings
from api.main import app
from services.screenplay_formatter import ScreenplayFormatter


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def formatter(settings) -> ScreenplayFormatter:
    return ScreenplayFormatter(settings)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create test client and drop dependency overrides afterwards."""
    yield TestClient(app)
    app.dependency_overrides.clear()
