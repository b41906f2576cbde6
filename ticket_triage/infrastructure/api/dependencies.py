"""Dependency wiring: builds the registry once and hands out use cases."""

from __future__ import annotations

from functools import lru_cache

from ticket_triage.adapters.llm.factory import build_provider_registry
from ticket_triage.application.provider_registry import ProviderRegistry
from ticket_triage.application.use_cases.analyze_ticket import AnalyzeTicketUseCase
from ticket_triage.config import settings
from ticket_triage.domain.entities.analysis_result import AnalysisResult
from ticket_triage.domain.entities.ticket import Ticket


@lru_cache(maxsize=1)
def get_provider_registry() -> ProviderRegistry:
    return build_provider_registry(settings)


def get_analyze_ticket_uc() -> AnalyzeTicketUseCase:
    return AnalyzeTicketUseCase(
        registry=get_provider_registry(),
        default_provider=settings.llm_default_provider,
        timeout_seconds=settings.llm_timeout_seconds,
        max_attempts=settings.llm_max_attempts,
        fallback_on_parse_error=settings.llm_fallback_on_parse_error,
    )


async def analyze_ticket(ticket: Ticket) -> AnalysisResult | None:
    """Triage *ticket* with the process-wide provider registry."""
    return await get_analyze_ticket_uc().execute(ticket)
