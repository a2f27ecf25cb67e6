"""Factory for creating classification hint providers."""

import logging

from api.config import Settings
from llm.base import BaseHintProvider
from llm.ollama import OllamaHintProvider

logger = logging.getLogger(__name__)


def get_hint_provider(settings: Settings) -> BaseHintProvider | None:
    """
    Create the hint provider selected in settings.

    Args:
        settings: Application settings

    Returns:
        Initialized provider, or None when hints are disabled

    Raises:
        ValueError: If provider type is invalid
    """
    provider_type = settings.hint_provider.strip().lower()

    if provider_type in ("", "none"):
        return None

    logger.info(f"Initializing hint provider: {provider_type}")

    if provider_type == "ollama":
        config = {
            "base_url": settings.ollama_base_url,
            "model": settings.ollama_model,
            "timeout": settings.ollama_timeout,
        }
        return OllamaHintProvider(config)

    raise ValueError(f"Invalid hint provider: {provider_type}. Valid options: none, ollama")
