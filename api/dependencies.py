"""FastAPI dependency injection functions."""

from fastapi import Depends

from api.config import Settings, get_settings
from llm.base import BaseHintProvider
from llm.factory import get_hint_provider
from services.screenplay_formatter import ScreenplayFormatter


async def get_settings_dependency() -> Settings:
    """Get application settings."""
    return get_settings()


async def get_formatter(
    settings: Settings = Depends(get_settings_dependency),
) -> ScreenplayFormatter:
    """Get a formatter bound to the configured page geometry and font."""
    return ScreenplayFormatter(settings)


async def get_hint_provider_dependency(
    settings: Settings = Depends(get_settings_dependency),
) -> BaseHintProvider | None:
    """Get the configured AI hint provider, or None when hints are disabled."""
    return get_hint_provider(settings)
