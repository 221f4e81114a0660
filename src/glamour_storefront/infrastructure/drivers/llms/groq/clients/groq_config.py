from __future__ import annotations

from dataclasses import dataclass

from glamour_storefront.core.exceptions.configuration_error import ConfigurationError
from glamour_storefront.infrastructure.configuration.llm_settings import LlmSettings


@dataclass(frozen=True, slots=True)
class GroqConfig:
    api_key: str
    model: str = "llama-3.3-70b-versatile"
    base_url: str = "https://api.groq.com/openai/v1"
    timeout_s: float = 15.0
    max_retries: int = 0

    @staticmethod
    def from_settings(settings: LlmSettings) -> GroqConfig:
        if not settings.ai_enabled:
            raise ConfigurationError("GROQ_API_KEY is required")
        return GroqConfig(
            api_key=settings.groq_api_key.get_secret_value(),  # type: ignore[union-attr]
            model=settings.groq_model,
            base_url=settings.groq_base_url,
            timeout_s=settings.llm_timeout_s,
        )
