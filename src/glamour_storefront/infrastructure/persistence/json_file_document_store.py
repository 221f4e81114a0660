from __future__ import annotations

import asyncio
import json
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.exceptions.persistence_error import PersistenceError
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError
from glamour_storefront.infrastructure.persistence.record_helpers import (
    find_unique_conflict,
    new_record_id,
    strip_reserved,
    utc_now,
)

logger = structlog.get_logger()


class JsonFileDocumentStore(DocumentStorePort):
    """One JSON file per collection under the runtime data directory.

    Records are kept as a list in insertion order. Writes replace the file
    atomically and are serialized by an in-process lock.
    """

    def __init__(self, store_dir: Path, collection: str, unique_fields: Iterable[str] = ()):
        self.collection = collection
        self.unique_fields = tuple(unique_fields)
        self.store_dir = store_dir
        self.file_path = store_dir / f"{collection}.json"
        self._lock = asyncio.Lock()
        self._ensure_store()

    def _ensure_store(self):
        if not self.store_dir.exists():
            self.store_dir.mkdir(parents=True, exist_ok=True)

        if not self.file_path.exists():
            self._write_json([])

    def _read_json(self) -> list[dict[str, Any]]:
        if not self.file_path.exists():
            return []
        try:
            with open(self.file_path, encoding="utf-8") as f:
                content = f.read().strip()
                if not content:
                    return []
                return json.loads(content)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Failed to read store file", collection=self.collection, error_type=type(e).__name__)
            raise PersistenceError(f"Failed to read {self.file_path}: {e}") from e

    def _write_json(self, data: list[dict[str, Any]]):
        """
        Atomic write: write to temp file then rename.
        """
        tmp_path = None
        try:
            # Temp file in the same directory so the rename stays on one filesystem
            with tempfile.NamedTemporaryFile("w", dir=self.store_dir, delete=False, encoding="utf-8") as tmp:
                tmp_path = tmp.name
                json.dump(data, tmp, indent=2, default=str)

            os.replace(tmp_path, self.file_path)

        except OSError as e:
            logger.error("Failed to write store file", collection=self.collection, error_type=type(e).__name__)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceError(f"Failed to write {self.file_path}: {e}", retryable=True) from e

    async def find_one(self, record_filter: RecordFilter) -> dict[str, Any] | None:
        for record in reversed(self._read_json()):
            if record_filter.matches(record):
                return record
        return None

    async def find_many(self, record_filter: RecordFilter | None = None, limit: int = 200) -> list[dict[str, Any]]:
        record_filter = record_filter or RecordFilter()
        return [r for r in reversed(self._read_json()) if record_filter.matches(r)][:limit]

    async def count(self, record_filter: RecordFilter | None = None) -> int:
        record_filter = record_filter or RecordFilter()
        return sum(1 for r in self._read_json() if record_filter.matches(r))

    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        async with self._lock:
            data = self._read_json()
            now = utc_now().isoformat()
            stored = {**strip_reserved(record), "id": new_record_id(), "created_at": now, "updated_at": now}
            self._check_unique(data, stored)
            data.append(stored)
            self._write_json(data)
            return stored

    async def update(self, record_id: str, patch: dict[str, Any]) -> dict[str, Any] | None:
        async with self._lock:
            data = self._read_json()
            for index, current in enumerate(data):
                if current.get("id") != record_id:
                    continue
                updated = {**current, **strip_reserved(patch), "updated_at": utc_now().isoformat()}
                self._check_unique(data, updated, exclude_id=record_id)
                data[index] = updated
                self._write_json(data)
                return updated
            return None

    async def delete(self, record_id: str) -> dict[str, Any] | None:
        async with self._lock:
            data = self._read_json()
            remaining = [r for r in data if r.get("id") != record_id]
            if len(remaining) == len(data):
                return None
            removed = next(r for r in data if r.get("id") == record_id)
            self._write_json(remaining)
            return removed

    def _check_unique(self, data: list[dict[str, Any]], candidate: dict[str, Any], exclude_id: str | None = None) -> None:
        conflict = find_unique_conflict(data, self.unique_fields, candidate, exclude_id)
        if conflict is not None:
            raise UniqueConstraintError(self.collection, *conflict)
