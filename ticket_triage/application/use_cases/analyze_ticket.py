"""AnalyzeTicketUseCase: triage a single ticket via a weighted-random LLM provider."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Callable

from ticket_triage.application.prompts import SYSTEM_PROMPT, build_prompt
from ticket_triage.application.provider_registry import ProviderRegistry
from ticket_triage.application.response_extractor import ParseError, extract
from ticket_triage.domain.entities.analysis_result import AnalysisResult
from ticket_triage.domain.entities.ticket import Ticket
from ticket_triage.domain.exceptions import ProviderError
from ticket_triage.domain.policies.provider_selection import (
    fallback_candidates,
    select_provider,
)

logger = logging.getLogger(__name__)


class AnalyzeTicketUseCase:
    """Orchestrates provider selection, the LLM call, parsing and fallback.

    Attempts run over a fixed per-call candidate list (the selected provider
    first, then the others in registry order), so each provider is tried at
    most once and the registry itself is never touched.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        rand: Callable[[], float] = random.random,
        default_provider: str = "gemini",
        timeout_seconds: float | None = 30.0,
        max_attempts: int | None = None,
        fallback_on_parse_error: bool = False,
    ):
        self._registry = registry
        self._rand = rand
        self._default_provider = default_provider
        self._timeout = timeout_seconds
        self._max_attempts = max_attempts
        self._fallback_on_parse_error = fallback_on_parse_error

    async def execute(self, ticket: Ticket) -> AnalysisResult | None:
        """Analyze a ticket and return the structured result.

        Args:
            ticket: title and description to triage.

        Returns:
            AnalysisResult tagged with the provider that produced it, or None
            when the output could not be parsed or every provider failed.
        """
        primary = select_provider(self._registry.weights(), self._rand, self._default_provider)
        candidates = fallback_candidates(self._registry.names(), primary)
        limit = min(self._max_attempts or len(candidates), len(candidates))
        prompt = build_prompt(ticket)

        for attempt, name in enumerate(candidates[:limit], start=1):
            if attempt > 1:
                logger.info("Falling back to %s (attempt %d/%d)", name, attempt, limit)

            try:
                raw_text = await self._invoke(name, prompt)
            except ProviderError as e:
                logger.warning("Attempt %d/%d: provider error: %s", attempt, limit, e)
                continue

            outcome = extract(raw_text)
            if isinstance(outcome, ParseError):
                logger.warning(
                    "Attempt %d/%d: failed to parse JSON from %s response: %s",
                    attempt, limit, name, outcome.reason,
                )
                logger.debug("Unparsable output from %s: %.200s", name, raw_text)
                if self._fallback_on_parse_error:
                    continue
                return None

            outcome.provider = name
            return outcome

        logger.error("All %d provider attempts failed for ticket %.80r", limit, ticket.title)
        return None

    async def _invoke(self, name: str, prompt: str) -> str:
        """Call one provider, normalising every failure into ProviderError."""
        client = self._registry.get(name)
        try:
            return await asyncio.wait_for(
                client.invoke(SYSTEM_PROMPT, prompt), timeout=self._timeout
            )
        except ProviderError:
            raise
        except asyncio.TimeoutError as e:
            raise ProviderError(name, f"timed out after {self._timeout}s") from e
        except Exception as e:
            logger.exception("Unexpected error from provider %s", name)
            raise ProviderError(name, str(e) or type(e).__name__) from e
