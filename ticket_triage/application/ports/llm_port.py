"""Port interface for LLM text-generation backends."""

from abc import ABC, abstractmethod


class LLMProviderPort(ABC):
    """Uniform capability every provider adapter implements."""

    name: str

    @abstractmethod
    async def invoke(self, system_prompt: str, user_prompt: str) -> str:
        """Send a system instruction plus a user prompt and return the raw text output.

        Raises:
            ProviderError: on any network, authentication, rate-limit
                or malformed-response failure.
        """
        ...
