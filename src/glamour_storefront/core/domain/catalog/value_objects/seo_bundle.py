from __future__ import annotations

from dataclasses import dataclass

MAX_META_TITLE_LENGTH = 60
MAX_META_DESCRIPTION_LENGTH = 160
MAX_KEYWORD_LENGTH = 30
MAX_KEYWORDS = 15
MAX_SLUG_LENGTH = 50


@dataclass(frozen=True, slots=True)
class SeoBundle:
    """Search-engine metadata derived for a product.

    Never persisted on its own: the ingestion service merges it into the
    product record as ``meta_title``, ``meta_description`` and ``meta_keywords``.
    """

    meta_title: str
    meta_description: str
    meta_keywords: tuple[str, ...]
    slug_candidate: str
    generated_by_ai: bool = False

    def __post_init__(self):
        if len(self.meta_title) > MAX_META_TITLE_LENGTH:
            raise ValueError(f"meta_title exceeds {MAX_META_TITLE_LENGTH} characters")
        if len(self.meta_description) > MAX_META_DESCRIPTION_LENGTH:
            raise ValueError(f"meta_description exceeds {MAX_META_DESCRIPTION_LENGTH} characters")
        if len(self.meta_keywords) > MAX_KEYWORDS:
            raise ValueError(f"meta_keywords holds more than {MAX_KEYWORDS} entries")
        if any(len(k) > MAX_KEYWORD_LENGTH for k in self.meta_keywords):
            raise ValueError(f"meta_keywords entries must not exceed {MAX_KEYWORD_LENGTH} characters")
        if len(self.slug_candidate) > MAX_SLUG_LENGTH:
            raise ValueError(f"slug_candidate exceeds {MAX_SLUG_LENGTH} characters")

    def as_record_fields(self) -> dict[str, object]:
        return {
            "meta_title": self.meta_title,
            "meta_description": self.meta_description,
            "meta_keywords": list(self.meta_keywords),
        }
