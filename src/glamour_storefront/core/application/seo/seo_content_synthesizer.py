from __future__ import annotations

import asyncio
import logging

from glamour_storefront.core.application.ports.text_generation_port import TextGenerationPort
from glamour_storefront.core.application.seo.prompt_templates.seo_prompt_builder import SeoPromptBuilder
from glamour_storefront.core.application.seo.seo_payload_parser import SeoPayloadError, SeoPayloadParser
from glamour_storefront.core.application.seo.slugifier import slugify
from glamour_storefront.core.domain.catalog.product import ProductDraft
from glamour_storefront.core.domain.catalog.value_objects.seo_bundle import (
    MAX_KEYWORD_LENGTH,
    MAX_KEYWORDS,
    MAX_META_DESCRIPTION_LENGTH,
    MAX_META_TITLE_LENGTH,
    SeoBundle,
)
from glamour_storefront.core.domain.store_profile import StoreProfile
from glamour_storefront.core.exceptions.provider_error import ProviderError

logger = logging.getLogger(__name__)

SEO_TEMPERATURE = 0.7
SEO_MAX_TOKENS = 500


class SeoContentSynthesizer:
    """
    Produces the SEO bundle for a product.

    AI generation is best effort: any failure (missing credential, provider
    error, timeout, malformed payload) resolves to a deterministic template
    bundle built from the product fields alone. ``synthesize`` never raises
    except on cancellation.
    """

    def __init__(
        self,
        text_generator: TextGenerationPort,
        profile: StoreProfile,
        timeout_s: float = 15.0,
        prompt_builder: SeoPromptBuilder | None = None,
        parser: SeoPayloadParser | None = None,
    ):
        self.text_generator = text_generator
        self.profile = profile
        self.timeout_s = timeout_s
        self.prompt_builder = prompt_builder or SeoPromptBuilder(profile)
        self.parser = parser or SeoPayloadParser()

    async def synthesize(self, product: ProductDraft) -> SeoBundle:
        logger.info("Generating SEO content for product '%s'", product.name)
        try:
            system_prompt, user_prompt = self.prompt_builder.build_seo_prompt(product)
            raw = await asyncio.wait_for(
                self.text_generator.complete(
                    system_prompt, user_prompt, temperature=SEO_TEMPERATURE, max_tokens=SEO_MAX_TOKENS
                ),
                timeout=self.timeout_s,
            )
            return self.parser.parse(raw, product.name)
        except ProviderError as e:
            logger.warning("SEO generation unavailable (%s). Using fallback SEO generation.", e)
        except TimeoutError:
            logger.warning("SEO generation timed out after %.1fs. Using fallback SEO generation.", self.timeout_s)
        except SeoPayloadError as e:
            logger.warning("SEO payload rejected (%s). Using fallback SEO generation.", e)
        except Exception as e:
            logger.error("Unexpected error generating SEO content: %s", e, exc_info=True)
        return self.fallback(product)

    def fallback(self, product: ProductDraft) -> SeoBundle:
        """Deterministic template bundle built from the product fields alone."""
        p = self.profile
        type_label = product.type.label

        title = f"{product.name} | {type_label} | {p.store_name} {p.country}"

        sentences = [f"Buy {product.name} for {p.format_price(product.price)}."]
        if product.description and product.description.strip():
            sentences.append(f"{product.description.strip()[:80].rstrip(' .')}.")
        sentences.append(f"Shop now at {p.store_name}!")
        description = " ".join(sentences)

        candidates = [
            product.name.lower(),
            product.type.value,
            product.category.value,
            product.collection.lower(),
            p.store_name.lower(),
            p.country.lower(),
            type_label.lower(),
            *p.generic_keywords,
        ]

        return SeoBundle(
            meta_title=title[:MAX_META_TITLE_LENGTH].strip(),
            meta_description=description[:MAX_META_DESCRIPTION_LENGTH].strip(),
            meta_keywords=_unique_keywords(candidates),
            slug_candidate=slugify(product.name),
        )


def _unique_keywords(candidates: list[str]) -> tuple[str, ...]:
    seen: list[str] = []
    for raw in candidates:
        keyword = raw.strip()[:MAX_KEYWORD_LENGTH].strip()
        if keyword and keyword not in seen:
            seen.append(keyword)
    return tuple(seen[:MAX_KEYWORDS])
