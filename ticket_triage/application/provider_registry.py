"""ProviderRegistry: immutable table of LLM backends and their selection weights."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ticket_triage.application.ports.llm_port import LLMProviderPort
from ticket_triage.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredProvider:
    name: str
    client: LLMProviderPort
    weight: float


class ProviderRegistry:
    """Read-only, insertion-ordered provider table.

    Built once at startup and shared across requests. Nothing here mutates
    after construction, so concurrent analyses can read it freely.
    """

    def __init__(self, providers: Iterable[RegisteredProvider]):
        entries = tuple(providers)
        if not entries:
            raise ConfigurationError("No LLM providers configured")

        seen: set[str] = set()
        for entry in entries:
            if entry.name in seen:
                raise ValueError(f"Duplicate provider name: {entry.name}")
            if entry.weight < 0:
                raise ValueError(f"Provider {entry.name} has a negative weight")
            seen.add(entry.name)

        total = sum(entry.weight for entry in entries)
        if abs(total - 1.0) > 1e-6:
            logger.warning(
                "Provider weights sum to %.3f, not 1.0; the remainder falls to the default provider",
                total,
            )

        self._entries = entries
        self._by_name = {entry.name: entry for entry in entries}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def weights(self) -> list[tuple[str, float]]:
        return [(entry.name, entry.weight) for entry in self._entries]

    def get(self, name: str) -> LLMProviderPort:
        """Return the client registered under *name*.

        Raises:
            KeyError: if no such provider is registered.
        """
        return self._by_name[name].client
