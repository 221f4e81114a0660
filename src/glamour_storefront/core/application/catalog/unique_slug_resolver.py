from __future__ import annotations

import logging

from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter

logger = logging.getLogger(__name__)


class UniqueSlugResolver:
    """
    Finds the first free slug among ``base``, ``base-1``, ``base-2``, ...

    This is a best-effort pre-check: it is not atomic with the subsequent
    write. The store's unique constraint on ``slug`` is the authority and the
    ingestion service retries on a constraint violation.
    """

    def __init__(self, store: DocumentStorePort):
        self.store = store

    async def resolve(self, base_slug: str, exclude_id: str | None = None) -> str:
        if not base_slug:
            raise ValueError("base_slug must not be empty")

        candidate = base_slug
        counter = 0
        while await self._is_taken(candidate, exclude_id):
            counter += 1
            candidate = f"{base_slug}-{counter}"

        if counter:
            logger.info("Slug '%s' taken, resolved to '%s'", base_slug, candidate)
        return candidate

    async def _is_taken(self, slug: str, exclude_id: str | None) -> bool:
        record_filter = RecordFilter.where(slug=slug).excluding(id=exclude_id)
        return await self.store.find_one(record_filter) is not None
