"""Gemini adapter: implements LLMProviderPort over the Generative Language REST API."""

from __future__ import annotations

import logging

import httpx

from ticket_triage.application.ports.llm_port import LLMProviderPort
from ticket_triage.config import settings
from ticket_triage.domain.exceptions import ProviderError
from ticket_triage.domain.value_objects.enums import ProviderName

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiAdapter(LLMProviderPort):
    """Google Gemini implementation of LLMProviderPort."""

    name = ProviderName.GEMINI.value

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        base_url: str = GEMINI_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._model = model or settings.gemini_model
        self._temperature = settings.llm_temperature if temperature is None else temperature
        self._max_tokens = max_tokens or settings.llm_max_tokens
        self._url = f"{base_url.rstrip('/')}/models/{self._model}:generateContent"
        self._transport = transport

    async def invoke(self, system_prompt: str, user_prompt: str) -> str:
        payload = {
            "systemInstruction": {"parts": [{"text": system_prompt}]},
            "contents": [{"role": "user", "parts": [{"text": user_prompt}]}],
            "generationConfig": {
                "temperature": self._temperature,
                "maxOutputTokens": self._max_tokens,
            },
        }

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self._url,
                    headers={"x-goog-api-key": self._api_key},
                    json=payload,
                    timeout=settings.llm_timeout_seconds,
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                self.name, f"HTTP {e.response.status_code} from generateContent"
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(self.name, "response body was not JSON") from e

        if not isinstance(data, dict):
            raise ProviderError(self.name, "response body was not a JSON object")

        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            block_reason = (data.get("promptFeedback") or {}).get("blockReason")
            if block_reason:
                raise ProviderError(self.name, f"prompt blocked: {block_reason}") from e
            raise ProviderError(self.name, "response contained no candidates") from e

        text = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
        if not text:
            raise ProviderError(self.name, "response contained no text")

        logger.debug("Gemini %s returned %d chars", self._model, len(text))
        return text
