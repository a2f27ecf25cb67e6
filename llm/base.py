"""Base class for AI classification hint providers."""

from abc import ABC, abstractmethod
from typing import Any

from core.models import ClassificationHint


class BaseHintProvider(ABC):
    """Base class for all classification hint providers.

    A provider suggests an element label and a confidence for each input
    line.  Its output only ever refines the rule-based classifier, which
    keeps working when no provider is configured or reachable.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        """
        Initialize hint provider.

        Args:
            config: Provider-specific configuration
        """
        self.config = config

    @abstractmethod
    async def classify_lines(self, lines: list[str]) -> list[ClassificationHint | None]:
        """
        Suggest a label for every line.

        Args:
            lines: Raw input lines

        Returns:
            One entry per input line; ``None`` where the provider has no
            suggestion (blank lines, unparseable output)

        Raises:
            LLMException: If the provider cannot be reached or answers garbage
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the provider is available.

        Returns:
            True if provider is healthy, False otherwise
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get provider name."""
        pass
