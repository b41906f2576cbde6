"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from ticket_triage.application.ports.llm_port import LLMProviderPort
from ticket_triage.application.provider_registry import ProviderRegistry, RegisteredProvider
from ticket_triage.domain.entities.ticket import Ticket
from ticket_triage.domain.exceptions import ProviderError

VALID_RESPONSE = (
    '{"summary": "Login page returns 500", "priority": "high", '
    '"helpfulNotes": "Check the auth service logs.", "relatedSkills": ["Node.js", "MongoDB"]}'
)


class FakeProvider(LLMProviderPort):
    """Scripted provider: returns or raises the queued outcomes in order."""

    def __init__(self, name: str, *outcomes: str | Exception):
        self.name = name
        self._outcomes = list(outcomes) or [VALID_RESPONSE]
        self.calls: list[tuple[str, str]] = []

    async def invoke(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        outcome = self._outcomes[min(len(self.calls), len(self._outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_registry(*providers: tuple[FakeProvider, float]) -> ProviderRegistry:
    return ProviderRegistry(
        RegisteredProvider(name=p.name, client=p, weight=w) for p, w in providers
    )


@pytest.fixture
def sample_ticket():
    return Ticket(
        title="Cannot log in",
        description="The login page returns a 500 error after submitting credentials.",
    )


@pytest.fixture
def failing():
    def _make(name: str) -> FakeProvider:
        return FakeProvider(name, ProviderError(name, "503 Service Unavailable"))

    return _make
