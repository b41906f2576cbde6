"""Domain enums: pure Python, no external dependencies."""

from enum import Enum


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProviderName(str, Enum):
    """Known LLM backends, in registry enumeration order."""

    GEMINI = "gemini"
    OPENAI = "openai"
    CLAUDE = "claude"
