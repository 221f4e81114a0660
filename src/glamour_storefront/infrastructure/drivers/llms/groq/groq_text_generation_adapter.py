from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import openai
import structlog

from glamour_storefront.core.application.ports.text_generation_port import TextGenerationPort
from glamour_storefront.core.exceptions.provider_error import ProviderError
from glamour_storefront.infrastructure.common.retry.retry_policy import RetryPolicy

PROVIDER = "groq"

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class GroqTextGenerationAdapter(TextGenerationPort):
    """Chat completions against Groq's OpenAI-compatible endpoint."""

    client: Any
    model: str
    retry: RetryPolicy

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        return await self.retry.run(lambda: self._call(system_prompt, user_prompt, temperature, max_tokens))

    async def _call(self, system_prompt: str, user_prompt: str, temperature: float, max_tokens: int) -> str:
        logger.debug("Groq request", model=self.model, temperature=temperature, max_tokens=max_tokens)
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception as exc:
            raise self._map_error(exc) from exc
        return self._content(resp)

    def _content(self, response: Any) -> str:
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise ProviderError(provider=PROVIDER, message=f"Unexpected response shape: {exc}") from exc
        if not content or not content.strip():
            finish_reason = getattr(response.choices[0], "finish_reason", "unknown")
            raise ProviderError(provider=PROVIDER, message=f"Empty content. Finish reason: {finish_reason}")
        return content

    def _map_error(self, exc: Exception) -> ProviderError:
        if isinstance(exc, openai.RateLimitError):
            return ProviderError(provider=PROVIDER, message=str(exc), retryable=True, status_code=429)
        if isinstance(exc, openai.APIConnectionError):
            # Includes APITimeoutError
            return ProviderError(provider=PROVIDER, message=str(exc), retryable=True)
        if isinstance(exc, openai.AuthenticationError):
            return ProviderError(provider=PROVIDER, message=str(exc), retryable=False, status_code=401)
        if isinstance(exc, openai.APIStatusError):
            return self._map_status_error(exc)
        return ProviderError(provider=PROVIDER, message=str(exc), retryable=False)

    def _map_status_error(self, exc: openai.APIStatusError) -> ProviderError:
        code = exc.status_code
        retryable = bool(code == 429 or code >= 500)
        return ProviderError(provider=PROVIDER, message=str(exc), retryable=retryable, status_code=code)
