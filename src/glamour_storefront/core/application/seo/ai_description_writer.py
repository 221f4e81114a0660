from __future__ import annotations

import asyncio
import logging

from glamour_storefront.core.application.ports.text_generation_port import TextGenerationPort
from glamour_storefront.core.application.seo.prompt_templates.seo_prompt_builder import SeoPromptBuilder
from glamour_storefront.core.application.seo.seo_payload_parser import strip_code_fences
from glamour_storefront.core.domain.store_profile import StoreProfile
from glamour_storefront.core.exceptions.provider_error import ProviderError

logger = logging.getLogger(__name__)

DESCRIPTION_TEMPERATURE = 0.8
DESCRIPTION_MAX_TOKENS = 200
MAX_DESCRIPTION_LENGTH = 1000


class AiDescriptionWriter:
    """Writes marketing copy for a product. Returns None whenever the service cannot help."""

    def __init__(
        self,
        text_generator: TextGenerationPort,
        profile: StoreProfile,
        timeout_s: float = 15.0,
        prompt_builder: SeoPromptBuilder | None = None,
    ):
        self.text_generator = text_generator
        self.timeout_s = timeout_s
        self.prompt_builder = prompt_builder or SeoPromptBuilder(profile)

    async def write(
        self, name: str, product_type: str, category: str, brief: str | None = None
    ) -> str | None:
        try:
            system_prompt, user_prompt = self.prompt_builder.build_description_prompt(
                name, product_type, category, brief
            )
            text = await asyncio.wait_for(
                self.text_generator.complete(
                    system_prompt,
                    user_prompt,
                    temperature=DESCRIPTION_TEMPERATURE,
                    max_tokens=DESCRIPTION_MAX_TOKENS,
                ),
                timeout=self.timeout_s,
            )
        except ProviderError as e:
            logger.warning("Description generation unavailable: %s", e)
            return None
        except TimeoutError:
            logger.warning("Description generation timed out after %.1fs", self.timeout_s)
            return None
        except Exception as e:
            logger.error("Unexpected error generating description: %s", e, exc_info=True)
            return None

        description = strip_code_fences(text or "").strip().strip('"').strip()
        return description[:MAX_DESCRIPTION_LENGTH] or None
