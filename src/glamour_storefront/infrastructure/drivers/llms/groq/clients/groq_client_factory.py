from __future__ import annotations

from dataclasses import dataclass

from openai import AsyncOpenAI

from glamour_storefront.infrastructure.drivers.llms.groq.clients.groq_config import GroqConfig


@dataclass(frozen=True)
class GroqClientFactory:
    config: GroqConfig

    def create(self) -> AsyncOpenAI:
        c = self.config
        return AsyncOpenAI(api_key=c.api_key, base_url=c.base_url, timeout=c.timeout_s, max_retries=c.max_retries)
