"""Ollama-backed classification hint provider."""

import json
import logging
import re
from typing import Any

import httpx
from pydantic import ValidationError

from core.exceptions import LLMException
from core.models import ClassificationHint
from llm.base import BaseHintProvider
from llm.prompt_manager import PromptManager, get_prompt_manager

logger = logging.getLogger(__name__)

HINT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "lines": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "index": {"type": "integer"},
                    "label": {"type": "string"},
                    "confidence": {"type": "number", "minimum": 0, "maximum": 1},
                },
                "required": ["index", "label", "confidence"],
            },
        }
    },
    "required": ["lines"],
}

# Models sometimes wrap JSON in markdown fences
_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


class OllamaHintProvider(BaseHintProvider):
    """Ask a local Ollama model to label screenplay lines."""

    def __init__(self, config: dict[str, Any], prompts: PromptManager | None = None) -> None:
        super().__init__(config)
        self.base_url = config.get("base_url", "http://ollama:11434")
        self.model = config.get("model", "mistral")
        self.timeout = config.get("timeout", 60)
        self._prompts = prompts

    @property
    def prompts(self) -> PromptManager:
        if self._prompts is None:
            self._prompts = get_prompt_manager()
        return self._prompts

    async def generate_chat(self, messages: list[dict[str, str]], temperature: float = 0.0) -> str:
        """
        Send *messages* to the Ollama chat endpoint in JSON mode.

        Args:
            messages: Chat messages with 'role' and 'content'
            temperature: Sampling temperature

        Returns:
            Raw content of the assistant message

        Raises:
            LLMException: On transport or HTTP status errors, or a body
                without a text message
        """
        payload = {
            "model": self.model,
            "messages": messages,
            "stream": False,
            "format": "json",
            "options": {"temperature": temperature},
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(f"{self.base_url}/api/chat", json=payload)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Ollama chat request to {self.base_url} failed: {e}")
            raise LLMException(
                f"Ollama request failed: {e}",
                details={"provider": "ollama", "base_url": self.base_url},
            )

        # A 200 can still carry {"error": ...} or a proxy's HTML page
        try:
            content = response.json()["message"]["content"]
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Unexpected Ollama chat response body: {e!r}")
            raise LLMException(
                "Unexpected response body from Ollama",
                details={"provider": "ollama", "response": response.text[:500]},
            )
        if not isinstance(content, str):
            raise LLMException(
                "Ollama message content is not text",
                details={"provider": "ollama", "response": response.text[:500]},
            )
        return content

    async def generate_structured(
        self, prompt: str, schema: dict[str, Any], system_prompt: str | None = None
    ) -> dict[str, Any]:
        """Ask for a JSON object matching *schema* and decode it."""
        messages = [{"role": "system", "content": system_prompt}] if system_prompt else []
        messages.append(
            {
                "role": "user",
                "content": f"{prompt}\n\nAnswer with a JSON object only, following this schema:\n"
                f"{json.dumps(schema)}",
            }
        )

        raw = await self.generate_chat(messages=messages)
        text = _FENCE_RE.sub("", raw.strip())

        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Ollama returned invalid JSON: {e}")
            raise LLMException(
                "Invalid JSON response from Ollama",
                details={"response": text[:500], "error": str(e)},
            )
        if not isinstance(parsed, dict):
            raise LLMException(
                "Ollama response is not a JSON object",
                details={"response": text[:500]},
            )
        return parsed

    async def classify_lines(self, lines: list[str]) -> list[ClassificationHint | None]:
        """Suggest a label for every non-blank line."""
        hints: list[ClassificationHint | None] = [None] * len(lines)
        numbered = [(i, line.strip()) for i, line in enumerate(lines) if line.strip()]
        if not numbered:
            return hints

        system, user = self.prompts.classification_prompt(numbered)
        result = await self.generate_structured(user, HINT_SCHEMA, system_prompt=system)

        entries = result.get("lines", [])
        if not isinstance(entries, list):
            raise LLMException(
                "Ollama response has no 'lines' array",
                details={"keys": sorted(result)},
            )

        skipped = 0
        for entry in entries:
            try:
                index = int(entry["index"])
                hint = ClassificationHint(label=str(entry["label"]), confidence=entry["confidence"])
            except (KeyError, TypeError, ValueError, ValidationError):
                skipped += 1
                continue
            if 0 <= index < len(lines) and lines[index].strip():
                hints[index] = hint
            else:
                skipped += 1

        if skipped:
            logger.warning("Ignored %d malformed hint entries from Ollama", skipped)
        return hints

    async def health_check(self) -> bool:
        """Check Ollama availability."""
        try:
            async with httpx.AsyncClient(timeout=10) as client:
                response = await client.get(f"{self.base_url}/api/tags")
                return response.status_code == 200
        except httpx.HTTPError as e:
            logger.error(f"Ollama health check failed: {e}")
            return False

    @property
    def provider_name(self) -> str:
        return "ollama"
