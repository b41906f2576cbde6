"""Application configuration via Pydantic Settings.

NOTE: Every provider credential is mapped to its conventional .env name
(GEMINI_API_KEY, OPENAI_API_KEY, ANTHROPIC_API_KEY) to avoid silent
misconfiguration. Keys are validated when the provider registry is built,
not here, so importing settings never fails.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Gemini
    gemini_api_key: str = Field(default="", validation_alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-1.5-flash-8b", validation_alias="GEMINI_MODEL")
    gemini_weight: float = Field(default=0.4, ge=0.0, le=1.0, validation_alias="GEMINI_WEIGHT")

    # OpenAI
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", validation_alias="OPENAI_MODEL")
    openai_weight: float = Field(default=0.4, ge=0.0, le=1.0, validation_alias="OPENAI_WEIGHT")

    # Anthropic
    anthropic_api_key: str = Field(default="", validation_alias="ANTHROPIC_API_KEY")
    anthropic_model: str = Field(
        default="claude-3-5-haiku-latest",
        validation_alias="ANTHROPIC_MODEL",
    )
    anthropic_weight: float = Field(default=0.2, ge=0.0, le=1.0, validation_alias="ANTHROPIC_WEIGHT")

    # Routing / fallback
    llm_default_provider: str = Field(default="gemini", validation_alias="LLM_DEFAULT_PROVIDER")
    llm_timeout_seconds: float = Field(default=30.0, gt=0, validation_alias="LLM_TIMEOUT_SECONDS")
    llm_max_attempts: int | None = Field(default=None, ge=1, validation_alias="LLM_MAX_ATTEMPTS")
    llm_fallback_on_parse_error: bool = Field(
        default=False,
        validation_alias="LLM_FALLBACK_ON_PARSE_ERROR",
    )
    llm_temperature: float = Field(default=0.2, validation_alias="LLM_TEMPERATURE")
    llm_max_tokens: int = Field(default=1024, validation_alias="LLM_MAX_TOKENS")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
