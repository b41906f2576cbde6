"""Claude adapter: implements LLMProviderPort using the Anthropic Messages API."""

from __future__ import annotations

import logging

from anthropic import AnthropicError, AsyncAnthropic

from ticket_triage.application.ports.llm_port import LLMProviderPort
from ticket_triage.config import settings
from ticket_triage.domain.exceptions import ProviderError
from ticket_triage.domain.value_objects.enums import ProviderName

logger = logging.getLogger(__name__)


class ClaudeAdapter(LLMProviderPort):
    """Anthropic implementation of LLMProviderPort."""

    name = ProviderName.CLAUDE.value

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        client: AsyncAnthropic | None = None,
    ):
        self._client = client or AsyncAnthropic(api_key=api_key, max_retries=0)
        self._model = model or settings.anthropic_model
        self._temperature = settings.llm_temperature if temperature is None else temperature
        self._max_tokens = max_tokens or settings.llm_max_tokens

    async def invoke(self, system_prompt: str, user_prompt: str) -> str:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except AnthropicError as e:
            raise ProviderError(self.name, f"request failed: {e}") from e

        # Only text blocks carry the answer
        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        if not text:
            raise ProviderError(self.name, "response contained no text")

        logger.debug("Claude %s returned %d chars", self._model, len(text))
        return text
