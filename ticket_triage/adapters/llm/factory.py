"""Build the provider registry from settings, validating credentials eagerly."""

from __future__ import annotations

import logging

from ticket_triage.adapters.llm.claude_adapter import ClaudeAdapter
from ticket_triage.adapters.llm.gemini_adapter import GeminiAdapter
from ticket_triage.adapters.llm.openai_adapter import OpenAIAdapter
from ticket_triage.application.provider_registry import ProviderRegistry, RegisteredProvider
from ticket_triage.config import Settings
from ticket_triage.domain.exceptions import ConfigurationError
from ticket_triage.domain.value_objects.enums import ProviderName

logger = logging.getLogger(__name__)

PLACEHOLDER_MARKERS = ("your-", "changeme", "<")


def _usable_key(key: str) -> bool:
    k = (key or "").strip()
    return bool(k) and not any(marker in k.lower() for marker in PLACEHOLDER_MARKERS)


def build_provider_registry(settings: Settings) -> ProviderRegistry:
    """Create one adapter per enabled provider, in Gemini, OpenAI, Claude order.

    A provider with weight 0 is disabled and its key may be empty. Any enabled
    provider without a usable key is a startup error rather than a failed call
    later on.

    Raises:
        ConfigurationError: if an enabled provider lacks a key, or none is enabled.
    """
    specs = [
        (ProviderName.GEMINI, "GEMINI_API_KEY", settings.gemini_api_key, settings.gemini_weight,
         lambda key: GeminiAdapter(key, model=settings.gemini_model)),
        (ProviderName.OPENAI, "OPENAI_API_KEY", settings.openai_api_key, settings.openai_weight,
         lambda key: OpenAIAdapter(key, model=settings.openai_model)),
        (ProviderName.CLAUDE, "ANTHROPIC_API_KEY", settings.anthropic_api_key, settings.anthropic_weight,
         lambda key: ClaudeAdapter(key, model=settings.anthropic_model)),
    ]

    entries: list[RegisteredProvider] = []
    for provider, env_var, key, weight, make in specs:
        if weight <= 0:
            logger.info("Provider %s disabled (weight 0)", provider.value)
            continue
        if not _usable_key(key):
            raise ConfigurationError(f"{env_var} is not set (or placeholder) for provider {provider.value}")
        entries.append(RegisteredProvider(name=provider.value, client=make(key.strip()), weight=weight))

    registry = ProviderRegistry(entries)
    logger.info(
        "Provider registry ready: %s",
        ", ".join(f"{name}={weight:.2f}" for name, weight in registry.weights()),
    )
    return registry
