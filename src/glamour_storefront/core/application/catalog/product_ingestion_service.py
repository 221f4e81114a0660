from __future__ import annotations

import logging
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

from glamour_storefront.core.application.catalog.unique_slug_resolver import UniqueSlugResolver
from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.application.seo.ai_description_writer import AiDescriptionWriter
from glamour_storefront.core.application.seo.seo_content_synthesizer import SeoContentSynthesizer
from glamour_storefront.core.application.seo.slugifier import slugify
from glamour_storefront.core.domain.catalog.product import Product, ProductDraft, ProductPatch
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError
from glamour_storefront.infrastructure.common.retry.retry_policy import RetryPolicy

logger = logging.getLogger(__name__)


def is_slug_conflict(exc: BaseException) -> bool:
    return isinstance(exc, UniqueConstraintError) and exc.field == "slug"


def fallback_slug_seed() -> str:
    """Seed used when neither the SEO candidate nor the name yields a slug."""
    return f"product-{uuid.uuid4().hex[:8]}"


class ProductIngestionService:
    """
    Creates and updates products.
    Coordinates: (description) -> SEO synthesis -> unique slug resolution -> persistence.

    Resolution and the write are re-run together when the store rejects the
    slug as a duplicate (a concurrent ingestion took it first).

    The description and SEO calls run one after the other and each gets the
    full AI timeout, so a creation can wait up to twice that timeout on the AI
    service before falling back.
    """

    def __init__(
        self,
        store: DocumentStorePort,
        synthesizer: SeoContentSynthesizer,
        resolver: UniqueSlugResolver,
        description_writer: AiDescriptionWriter | None = None,
        conflict_retry: RetryPolicy | None = None,
    ):
        self.store = store
        self.synthesizer = synthesizer
        self.resolver = resolver
        self.description_writer = description_writer
        self.conflict_retry = conflict_retry or RetryPolicy(
            max_attempts=3, initial_wait_s=0.01, max_wait_s=0.2, retry_on=is_slug_conflict
        )

    async def ingest(self, draft: ProductDraft) -> Product:
        draft = await self._with_description(draft)

        bundle = await self.synthesizer.synthesize(draft)
        base_slug = bundle.slug_candidate or slugify(draft.name) or fallback_slug_seed()
        record = {**draft.to_record(), **bundle.as_record_fields()}

        async def write(slug: str) -> dict[str, Any]:
            return await self.store.insert({**record, "slug": slug})

        stored = await self._persist_with_unique_slug(base_slug, None, write)
        logger.info(
            "Product '%s' created with slug '%s' (ai_seo=%s)", draft.name, stored["slug"], bundle.generated_by_ai
        )
        return Product.model_validate(stored)

    async def update(self, product_id: str, patch: ProductPatch, regenerate_seo: bool = False) -> Product:
        existing = await self.store.find_one(RecordFilter.where(id=product_id))
        if existing is None:
            raise RecordNotFoundError("Product", product_id)

        changes = patch.changes()
        requested_slug = changes.pop("slug", None)
        merged = Product.model_validate({**existing, **changes})

        if regenerate_seo:
            bundle = await self.synthesizer.synthesize(merged)
            changes.update(bundle.as_record_fields())
            base_slug = bundle.slug_candidate or slugify(merged.name)
        elif requested_slug is not None:
            base_slug = slugify(requested_slug)
        else:
            base_slug = existing.get("slug") or slugify(merged.name)
        base_slug = base_slug or fallback_slug_seed()

        async def write(slug: str) -> dict[str, Any]:
            updated = await self.store.update(product_id, {**changes, "slug": slug})
            if updated is None:
                raise RecordNotFoundError("Product", product_id)
            return updated

        stored = await self._persist_with_unique_slug(base_slug, product_id, write)
        logger.info("Product %s updated (slug '%s')", product_id, stored["slug"])
        return Product.model_validate(stored)

    async def _with_description(self, draft: ProductDraft) -> ProductDraft:
        if draft.description or self.description_writer is None:
            return draft
        description = await self.description_writer.write(
            draft.name, draft.type.value, draft.category.value, draft.collection or None
        )
        if description is None:
            return draft
        return draft.model_copy(update={"description": description})

    async def _persist_with_unique_slug(
        self,
        base_slug: str,
        exclude_id: str | None,
        write: Callable[[str], Awaitable[dict[str, Any]]],
    ) -> dict[str, Any]:
        attempt = 0

        async def resolve_and_write() -> dict[str, Any]:
            nonlocal attempt
            attempt += 1
            slug = await self.resolver.resolve(base_slug, exclude_id=exclude_id)
            try:
                return await write(slug)
            except UniqueConstraintError as e:
                if is_slug_conflict(e):
                    logger.warning("Slug '%s' claimed concurrently (attempt %d)", slug, attempt)
                raise

        return await self.conflict_retry.run(resolve_and_write)
