"""Tests for ProviderRegistry."""

import logging

import pytest

from conftest import FakeProvider, make_registry
from ticket_triage.application.provider_registry import ProviderRegistry, RegisteredProvider
from ticket_triage.domain.exceptions import ConfigurationError


def test_registry_preserves_insertion_order():
    registry = make_registry(
        (FakeProvider("gemini"), 0.4), (FakeProvider("openai"), 0.4), (FakeProvider("claude"), 0.2)
    )
    assert registry.names() == ["gemini", "openai", "claude"]
    assert registry.weights() == [("gemini", 0.4), ("openai", 0.4), ("claude", 0.2)]
    assert len(registry) == 3


def test_registry_get_returns_client():
    openai = FakeProvider("openai")
    registry = make_registry((FakeProvider("gemini"), 0.5), (openai, 0.5))
    assert registry.get("openai") is openai
    assert "openai" in registry
    assert "claude" not in registry


def test_registry_get_unknown_raises():
    registry = make_registry((FakeProvider("gemini"), 1.0))
    with pytest.raises(KeyError):
        registry.get("claude")


def test_registry_empty_raises():
    with pytest.raises(ConfigurationError, match="No LLM providers"):
        ProviderRegistry([])


def test_registry_duplicate_names_raise():
    with pytest.raises(ValueError, match="Duplicate provider"):
        make_registry((FakeProvider("gemini"), 0.5), (FakeProvider("gemini"), 0.5))


def test_registry_negative_weight_raises():
    with pytest.raises(ValueError, match="negative weight"):
        make_registry((FakeProvider("gemini"), -0.1))


def test_registry_warns_when_weights_do_not_sum_to_one(caplog):
    with caplog.at_level(logging.WARNING):
        make_registry((FakeProvider("gemini"), 0.3), (FakeProvider("openai"), 0.3))
    assert "sum to 0.600" in caplog.text


def test_registry_entries_are_frozen():
    entry = RegisteredProvider(name="gemini", client=FakeProvider("gemini"), weight=1.0)
    with pytest.raises(AttributeError):
        entry.client = FakeProvider("openai")  # type: ignore[misc]
