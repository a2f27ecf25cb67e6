"""Prompt templates for the AI hint providers, loaded from YAML.

Prompts live in ``config/prompts/prompts.yaml`` so wording can change
without touching Python code.
"""

import logging
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from core.models import ElementType

logger = logging.getLogger(__name__)

_DEFAULT_YAML_PATH = Path(__file__).resolve().parent.parent / "config" / "prompts" / "prompts.yaml"


class PromptManager:
    """Load and format prompts from a YAML configuration file.

    Usage::

        pm = get_prompt_manager()
        system, user = pm.classification_prompt([(0, "INT. HOUSE - DAY"), (1, "JOHN")])
    """

    def __init__(self, yaml_path: Path | str | None = None) -> None:
        path = Path(yaml_path) if yaml_path else _DEFAULT_YAML_PATH
        if not path.exists():
            raise FileNotFoundError(f"Prompt YAML not found: {path}")
        self._prompts: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        self._version = str(self._prompts.get("version", "unknown"))

        for section, entries in self._prompts.items():
            if section == "version":
                continue
            for name, entry in entries.items():
                if not isinstance(entry, dict) or not {"system", "user"} <= entry.keys():
                    raise ValueError(f"Prompt {section}.{name} needs 'system' and 'user' templates")

        logger.info("PromptManager loaded v%s from %s", self._version, path)

    @property
    def version(self) -> str:
        return self._version

    def get(self, section: str, name: str, **kwargs: Any) -> tuple[str, str]:
        """Return ``(system_prompt, user_prompt)`` with variables substituted.

        Raises ``KeyError`` if section/name does not exist or a template
        variable is missing from *kwargs*.
        """
        try:
            entry = self._prompts[section][name]
        except KeyError:
            raise KeyError(f"Prompt not found: {section}.{name}")

        system = entry["system"].strip()
        user = entry["user"].strip().format(**kwargs)
        return system, user

    def classification_prompt(self, numbered_lines: Sequence[tuple[int, str]]) -> tuple[str, str]:
        """Prompt asking for one element label per ``(index, text)`` line."""
        return self.get(
            "classification",
            "lines",
            labels=", ".join(member.value for member in ElementType),
            numbered_lines="\n".join(f"{index}: {text}" for index, text in numbered_lines),
        )


@lru_cache
def get_prompt_manager() -> PromptManager:
    """Return a cached singleton ``PromptManager``."""
    return PromptManager()
