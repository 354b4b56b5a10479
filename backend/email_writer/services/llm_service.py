"""
LLM Service — the Gemini client binding, via LiteLLM.

Responsibilities:
  • Hold the configured API key + model identifier (built once at startup)
  • Send a single free-text prompt and return the generated text
  • Treat a response without text as a failure

No retries, no timeouts of our own: LiteLLM / provider defaults apply.
"""

from __future__ import annotations

import logging
from typing import Any

import litellm
from litellm import acompletion

from email_writer.config import MODELS, Settings

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs
litellm.suppress_debug_info = True
litellm.set_verbose = False


def _resolve_model_id(model_key: str) -> str:
    """Look up the LiteLLM model_id from our registry, falling back to gemini/<key>."""
    model_entry = MODELS.get(model_key)
    if model_entry:
        return model_entry["model_id"]
    if model_key.startswith("gemini/"):
        return model_key
    return f"gemini/{model_key}"


class GeminiClient:
    """Read-only handle to the generative-language service, shared across requests."""

    def __init__(self, api_key: str | None, model_id: str):
        self._api_key = api_key
        self._model_id = model_id

    @classmethod
    def from_settings(cls, settings: Settings) -> GeminiClient:
        return cls(
            api_key=settings.gemini_api_key,
            model_id=_resolve_model_id(settings.gemini_model),
        )

    @property
    def model_id(self) -> str:
        return self._model_id

    async def generate(self, prompt: str) -> str:
        """
        Send one prompt to the model and return the generated text.

        Raises:
            ValueError: the response carried no text.
            Exception:  anything LiteLLM raises (network, auth, provider errors).
        """
        kwargs: dict[str, Any] = {
            "model": self._model_id,
            "messages": [{"role": "user", "content": prompt}],
        }
        if self._api_key:
            kwargs["api_key"] = self._api_key

        logger.info(f"LLM call: model={self._model_id} prompt={len(prompt)} chars")

        response = await acompletion(**kwargs)
        choices = getattr(response, "choices", None)
        if not choices:
            raise ValueError("Malformed response: no choices returned")
        content = choices[0].message.content
        if content is None:
            raise ValueError("Malformed response: no text in first choice")

        logger.info(f"LLM response: {len(content)} chars")
        return content
