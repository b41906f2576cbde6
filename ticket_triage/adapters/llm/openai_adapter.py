"""OpenAI adapter: implements LLMProviderPort using the OpenAI API."""

from __future__ import annotations

import logging

from openai import AsyncOpenAI, OpenAIError

from ticket_triage.application.ports.llm_port import LLMProviderPort
from ticket_triage.config import settings
from ticket_triage.domain.exceptions import ProviderError
from ticket_triage.domain.value_objects.enums import ProviderName

logger = logging.getLogger(__name__)


class OpenAIAdapter(LLMProviderPort):
    """OpenAI chat-completions implementation of LLMProviderPort."""

    name = ProviderName.OPENAI.value

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        client: AsyncOpenAI | None = None,
    ):
        # SDK-level retries are disabled: fallback to another provider handles failures
        self._client = client or AsyncOpenAI(api_key=api_key, max_retries=0)
        self._model = model or settings.openai_model
        self._temperature = settings.llm_temperature if temperature is None else temperature
        self._max_tokens = max_tokens or settings.llm_max_tokens

    async def invoke(self, system_prompt: str, user_prompt: str) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except OpenAIError as e:
            raise ProviderError(self.name, f"request failed: {e}") from e

        if not response.choices:
            raise ProviderError(self.name, "response contained no choices")

        content = response.choices[0].message.content
        if not content:
            raise ProviderError(self.name, "response contained no text")

        logger.debug("OpenAI %s returned %d chars", self._model, len(content))
        return content
