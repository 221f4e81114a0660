"""
Parsing of the raw SEO text returned by the generation service.

The service is asked for bare JSON but frequently wraps it in Markdown code
fences; those are stripped before validation.
"""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from glamour_storefront.core.application.seo.slugifier import slugify
from glamour_storefront.core.domain.catalog.value_objects.seo_bundle import (
    MAX_KEYWORD_LENGTH,
    MAX_KEYWORDS,
    MAX_META_DESCRIPTION_LENGTH,
    MAX_META_TITLE_LENGTH,
    SeoBundle,
)

logger = logging.getLogger(__name__)

_OPENING_FENCE = re.compile(r"^```(?:json)?", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"```$")


class SeoPayloadError(Exception):
    """Raised when the generated text cannot be turned into a usable SEO bundle."""


class SeoPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    metaTitle: str
    metaDescription: str
    metaKeywords: list[str] = Field(default_factory=list)
    seoSlug: str = ""


def strip_code_fences(text: str) -> str:
    cleaned = text.strip()
    cleaned = _OPENING_FENCE.sub("", cleaned)
    cleaned = _CLOSING_FENCE.sub("", cleaned)
    return cleaned.strip()


def _clip(value: str, max_length: int) -> str:
    return value.strip()[:max_length].strip()


class SeoPayloadParser:
    def parse(self, raw_text: str, product_name: str) -> SeoBundle:
        """
        Turn the service response into a sanitized SeoBundle.

        Args:
            raw_text: Message content returned by the service.
            product_name: Used to derive the slug when the payload has none.

        Raises:
            SeoPayloadError: On invalid JSON, schema mismatch or empty fields.
        """
        content = strip_code_fences(raw_text or "")
        if not content:
            raise SeoPayloadError("Empty SEO payload")

        try:
            payload = SeoPayload.model_validate_json(content)
        except ValidationError as e:
            raise SeoPayloadError(f"Invalid SEO payload: {e.error_count()} error(s)") from e

        title = _clip(payload.metaTitle, MAX_META_TITLE_LENGTH)
        description = _clip(payload.metaDescription, MAX_META_DESCRIPTION_LENGTH)
        if not title or not description:
            raise SeoPayloadError("SEO payload has blank title or description")

        keywords = tuple(
            k for k in (_clip(raw, MAX_KEYWORD_LENGTH) for raw in payload.metaKeywords[:MAX_KEYWORDS]) if k
        )
        slug = slugify(payload.seoSlug.strip() or product_name)

        return SeoBundle(
            meta_title=title,
            meta_description=description,
            meta_keywords=keywords,
            slug_candidate=slug,
            generated_by_ai=True,
        )
