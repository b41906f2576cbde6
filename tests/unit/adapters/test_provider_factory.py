"""Tests for building the provider registry from settings."""

import pytest

from ticket_triage.adapters.llm.claude_adapter import ClaudeAdapter
from ticket_triage.adapters.llm.factory import build_provider_registry
from ticket_triage.adapters.llm.gemini_adapter import GeminiAdapter
from ticket_triage.adapters.llm.openai_adapter import OpenAIAdapter
from ticket_triage.config import Settings
from ticket_triage.domain.exceptions import ConfigurationError


def _settings(**overrides) -> Settings:
    values = {
        "GEMINI_API_KEY": "AIza-test",
        "OPENAI_API_KEY": "sk-test",
        "ANTHROPIC_API_KEY": "sk-ant-test",
        "GEMINI_WEIGHT": 0.4,
        "OPENAI_WEIGHT": 0.4,
        "ANTHROPIC_WEIGHT": 0.2,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_builds_all_three_in_order():
    registry = build_provider_registry(_settings())

    assert registry.weights() == [("gemini", 0.4), ("openai", 0.4), ("claude", 0.2)]
    assert isinstance(registry.get("gemini"), GeminiAdapter)
    assert isinstance(registry.get("openai"), OpenAIAdapter)
    assert isinstance(registry.get("claude"), ClaudeAdapter)


@pytest.mark.parametrize(
    "env_var",
    ["GEMINI_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY"],
)
def test_missing_key_fails_fast(env_var):
    with pytest.raises(ConfigurationError, match=env_var):
        build_provider_registry(_settings(**{env_var: ""}))


def test_placeholder_key_fails_fast():
    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        build_provider_registry(_settings(OPENAI_API_KEY="your-openai-api-key"))


def test_zero_weight_provider_is_skipped_without_key():
    registry = build_provider_registry(
        _settings(ANTHROPIC_API_KEY="", ANTHROPIC_WEIGHT=0.0, GEMINI_WEIGHT=0.6)
    )
    assert registry.names() == ["gemini", "openai"]


def test_all_disabled_fails_fast():
    with pytest.raises(ConfigurationError, match="No LLM providers"):
        build_provider_registry(
            _settings(GEMINI_WEIGHT=0.0, OPENAI_WEIGHT=0.0, ANTHROPIC_WEIGHT=0.0)
        )
