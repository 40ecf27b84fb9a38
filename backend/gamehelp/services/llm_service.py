"""LLM service - answers game questions through DashScope (通义千问).

Backs the relay endpoint: one prompt per question, scoped to the game the
user picked in the carousel.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import yaml

from gamehelp.config import settings
from gamehelp.core.errors import LLMServiceError

CHARACTER_DIR = Path(__file__).parent.parent / "data" / "characters"


def _get_generation():
    """Lazy import of dashscope.Generation to avoid import-time crashes in test."""
    import dashscope
    from dashscope import Generation

    dashscope.api_key = settings.DASHSCOPE_API_KEY
    return Generation


def load_persona(persona: str = "game_expert") -> dict:
    """Load a persona YAML and return the full config dict."""
    path = CHARACTER_DIR / f"{persona}.yaml"
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class LLMService:
    def __init__(self, persona: str = "game_expert"):
        self.model = settings.LLM_MODEL
        config = load_persona(persona)
        self._template = config.get("prompt_template", "{message}")
        self._model_params = config.get("model_params", {})

    def build_prompt(self, message: str, context: str | None = None) -> str:
        """Fill the persona template with the game name and the user's question."""
        game = context or settings.DEFAULT_GAME_CONTEXT
        return self._template.format(game=game, message=message)

    def _call(self, prompt: str):
        Generation = _get_generation()
        return Generation.call(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            result_format="message",
            temperature=self._model_params.get("temperature", 0.7),
            top_p=self._model_params.get("top_p", 0.8),
            max_tokens=self._model_params.get("max_tokens", 1500),
        )

    async def respond(self, message: str, context: str | None = None) -> str:
        """Return the assistant's answer. Raises LLMServiceError on API failure."""
        prompt = self.build_prompt(message, context)
        # The SDK call is blocking; keep it off the event loop
        try:
            response = await asyncio.to_thread(self._call, prompt)
        except Exception as e:
            # SDK raises its own transport and auth errors
            raise LLMServiceError(f"LLM API call failed: {e!r}") from e

        if response.status_code != 200:
            raise LLMServiceError(
                f"LLM API error: {response.status_code} - {response.message}"
            )
        try:
            content = response.output.choices[0].message.content
        except (AttributeError, IndexError, KeyError) as e:
            raise LLMServiceError("LLM API returned an unexpected payload") from e
        if not content or not content.strip():
            raise LLMServiceError("LLM API returned an empty answer")
        return content.strip()


llm_service = LLMService()
