"""Domain exceptions for ticket triage."""

from __future__ import annotations


class TriageError(Exception):
    """Base error for the triage service."""


class ConfigurationError(TriageError):
    """Raised at startup when provider configuration is missing or invalid."""


class ProviderError(TriageError):
    """Raised when a provider call fails (network, auth, rate limit, timeout, bad payload).

    Eligible for fallback to another provider.
    """

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
