from __future__ import annotations

from dataclasses import dataclass

from glamour_storefront.core.application.ports.text_generation_port import TextGenerationPort
from glamour_storefront.core.exceptions.provider_error import ProviderError


@dataclass(frozen=True)
class UnconfiguredTextGenerationAdapter(TextGenerationPort):
    """Stand-in wired when no API key is configured; every call fails fast."""

    provider: str = "groq"
    reason: str = "GROQ_API_KEY not set"

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        raise ProviderError(provider=self.provider, message=self.reason, retryable=False)
