"""
URL slug generation.

Converts arbitrary product text into a lowercase, hyphen separated token
limited to ``[a-z0-9-]`` and at most 50 characters.
"""

from __future__ import annotations

import re
import unicodedata

from glamour_storefront.core.domain.catalog.value_objects.seo_bundle import MAX_SLUG_LENGTH

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9-]+")
_HYPHEN_RUNS = re.compile(r"-{2,}")


def slugify(text: str | None, max_length: int = MAX_SLUG_LENGTH) -> str:
    """
    Generate a URL-friendly slug from text.

    Never raises. Returns an empty string when nothing usable remains
    (e.g. the input was only symbols); callers decide on a fallback seed.

    Example:
        >>> slugify("Crème  Brûlée Lip Balm!")
        'creme-brulee-lip-balm'
    """
    if not text:
        return ""

    value = unicodedata.normalize("NFD", str(text).lower())
    value = "".join(ch for ch in value if not unicodedata.combining(ch))
    value = _WHITESPACE.sub("-", value.strip())
    value = _DISALLOWED.sub("", value)
    value = _HYPHEN_RUNS.sub("-", value).strip("-")

    # Truncation can expose a hyphen at the cut
    return value[:max_length].strip("-")
