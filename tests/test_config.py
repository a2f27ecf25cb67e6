"""Tests for application settings parsing."""

import pytest
from pydantic import ValidationError

from api.config import Settings


def test_defaults_are_a4(settings):
    """Default geometry is A4 with the editor's margins."""
    geometry = settings.page_geometry
    assert geometry.available_height == pytest.approx(734.17, abs=0.01)
    assert geometry.content_width == pytest.approx(453.54, abs=0.01)


def test_cors_origins_from_comma_separated_env(monkeypatch):
    """Parse CORS origins from comma-separated env var."""
    monkeypatch.setenv(
        "CORS_ORIGINS",
        "https://a.example, https://b.example",
    )
    settings = Settings(_env_file=None)
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_cors_origins_from_json_env(monkeypatch):
    """Parse CORS origins from JSON array env var."""
    monkeypatch.setenv(
        "CORS_ORIGINS",
        '["https://a.example", "https://b.example"]',
    )
    settings = Settings(_env_file=None)
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_cors_origins_invalid_json_env_raises(monkeypatch):
    """Reject invalid JSON that starts with [ but is not valid."""
    monkeypatch.setenv("CORS_ORIGINS", "[not json]")
    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_page_geometry_from_env(monkeypatch):
    """Page size and margins come from the environment."""
    monkeypatch.setenv("PAGE_HEIGHT_CM", "27.94")
    monkeypatch.setenv("PAGE_MARGIN_TOP_CM", "2.54")
    monkeypatch.setenv("PAGE_MARGIN_BOTTOM_CM", "2.54")
    settings = Settings(_env_file=None)
    assert settings.page_geometry.available_height == pytest.approx(648.0)


def test_margins_must_leave_room():
    """Margins that swallow the page are rejected."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, page_margin_top_cm=15, page_margin_bottom_cm=15)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, page_margin_left_cm=11, page_margin_right_cm=10)


def test_hint_confidence_bounds():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, hint_min_confidence=1.5)


def test_is_production():
    assert Settings(_env_file=None, env="prod").is_production
    assert not Settings(_env_file=None).is_production
