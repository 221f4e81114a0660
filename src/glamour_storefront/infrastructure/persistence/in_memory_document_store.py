from __future__ import annotations

import asyncio
import copy
from collections.abc import Iterable
from typing import Any

from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError
from glamour_storefront.infrastructure.persistence.record_helpers import (
    find_unique_conflict,
    new_record_id,
    strip_reserved,
    utc_now,
)


class InMemoryDocumentStore(DocumentStorePort):
    """Process-local store. Writes hold a lock so the unique check and the write are atomic."""

    def __init__(self, collection: str, unique_fields: Iterable[str] = ()):
        self.collection = collection
        self.unique_fields = tuple(unique_fields)
        self._records: dict[str, dict[str, Any]] = {}
        self._lock = asyncio.Lock()

    async def find_one(self, record_filter: RecordFilter) -> dict[str, Any] | None:
        for record in self._ordered():
            if record_filter.matches(record):
                return copy.deepcopy(record)
        return None

    async def find_many(self, record_filter: RecordFilter | None = None, limit: int = 200) -> list[dict[str, Any]]:
        record_filter = record_filter or RecordFilter()
        matches = [r for r in self._ordered() if record_filter.matches(r)]
        return copy.deepcopy(matches[:limit])

    async def count(self, record_filter: RecordFilter | None = None) -> int:
        record_filter = record_filter or RecordFilter()
        return sum(1 for r in self._records.values() if record_filter.matches(r))

    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        async with self._lock:
            now = utc_now()
            stored = {**strip_reserved(record), "id": new_record_id(), "created_at": now, "updated_at": now}
            self._check_unique(stored)
            self._records[stored["id"]] = stored
            return copy.deepcopy(stored)

    async def update(self, record_id: str, patch: dict[str, Any]) -> dict[str, Any] | None:
        async with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            updated = {**current, **strip_reserved(patch), "updated_at": utc_now()}
            self._check_unique(updated, exclude_id=record_id)
            self._records[record_id] = updated
            return copy.deepcopy(updated)

    async def delete(self, record_id: str) -> dict[str, Any] | None:
        async with self._lock:
            removed = self._records.pop(record_id, None)
            return copy.deepcopy(removed) if removed is not None else None

    def _check_unique(self, candidate: dict[str, Any], exclude_id: str | None = None) -> None:
        conflict = find_unique_conflict(self._records.values(), self.unique_fields, candidate, exclude_id)
        if conflict is not None:
            raise UniqueConstraintError(self.collection, *conflict)

    def _ordered(self) -> list[dict[str, Any]]:
        # dict preserves insertion order; newest first
        return list(reversed(self._records.values()))
