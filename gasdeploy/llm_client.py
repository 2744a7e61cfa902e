"""
llm_client.py

Responsibility: Isolate the text-generation HTTP call.

Speaks the OpenAI-style chat completions API: one user message in, the first
choice's message content out. No retries; any failure is a GenerationError.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    pass


class ChatCompletionClient:
    def __init__(
        self,
        api_key: str,
        *,
        api_base: str = "https://api.openai.com/v1",
        model: str = "gpt-3.5-turbo",
        max_tokens: int = 1500,
        temperature: float = 0.3,
    ) -> None:
        if not api_key.strip():
            raise GenerationError("API key is required for text generation.")
        self._api_key = api_key
        self._api_base = api_base.rstrip("/")
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def complete(self, prompt: str) -> str:
        url = f"{self._api_base}/chat/completions"
        body: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
        logger.debug("POST %s model=%s prompt_chars=%d", url, self.model, len(prompt))
        try:
            r = requests.request("POST", url, headers=self._headers(), json=body, timeout=120)
        except requests.RequestException as e:
            raise GenerationError(f"Text generation request failed: {e}") from e

        if r.status_code >= 400:
            try:
                payload = r.json()
            except ValueError:
                payload = r.text
            raise GenerationError(f"Text generation API error {r.status_code}: {payload}")

        try:
            return str(r.json()["choices"][0]["message"]["content"])
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise GenerationError(f"Unexpected text generation response: {r.text[:500]}") from e
