"""AI classification hint providers."""

from llm.base import BaseHintProvider
from llm.factory import get_hint_provider

__all__ = ["get_hint_provider", "BaseHintProvider"]
