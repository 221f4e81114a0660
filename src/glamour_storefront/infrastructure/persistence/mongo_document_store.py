from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import AutoReconnect, ConnectionFailure, DuplicateKeyError, PyMongoError

from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.exceptions.persistence_error import PersistenceError
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError
from glamour_storefront.infrastructure.persistence.record_helpers import (
    new_record_id,
    strip_reserved,
    utc_now,
)

logger = structlog.get_logger()

_PROJECTION = {"_id": 0}


def to_query(record_filter: RecordFilter | None) -> dict[str, Any]:
    if record_filter is None:
        return {}
    query: dict[str, Any] = dict(record_filter.eq)
    for key, value in record_filter.ne.items():
        condition = query.get(key)
        if condition is None:
            query[key] = {"$ne": value}
        else:
            # eq and ne on the same field
            query[key] = {"$eq": condition, "$ne": value}
    return query


class MongoDocumentStore(DocumentStorePort):
    """MongoDB collection accessed through motor. Unique fields are backed by unique indexes."""

    def __init__(self, database: AsyncIOMotorDatabase, collection: str, unique_fields: Iterable[str] = ()):
        self.collection = collection
        self.unique_fields = tuple(unique_fields)
        self._collection = database[collection]

    async def ensure_indexes(self) -> None:
        try:
            await self._collection.create_index("id", unique=True)
            for field in self.unique_fields:
                await self._collection.create_index(field, unique=True)
            await self._collection.create_index([("created_at", -1)])
        except PyMongoError as e:
            raise self._map_error(e) from e

    async def find_one(self, record_filter: RecordFilter) -> dict[str, Any] | None:
        try:
            return await self._collection.find_one(to_query(record_filter), _PROJECTION)
        except PyMongoError as e:
            raise self._map_error(e) from e

    async def find_many(self, record_filter: RecordFilter | None = None, limit: int = 200) -> list[dict[str, Any]]:
        try:
            cursor = self._collection.find(to_query(record_filter), _PROJECTION).sort("created_at", -1).limit(limit)
            return [doc async for doc in cursor]
        except PyMongoError as e:
            raise self._map_error(e) from e

    async def count(self, record_filter: RecordFilter | None = None) -> int:
        try:
            return await self._collection.count_documents(to_query(record_filter))
        except PyMongoError as e:
            raise self._map_error(e) from e

    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        now = utc_now()
        document = {**strip_reserved(record), "id": new_record_id(), "created_at": now, "updated_at": now}
        try:
            await self._collection.insert_one(document)
        except PyMongoError as e:
            raise self._map_error(e, document) from e
        document.pop("_id", None)
        return document

    async def update(self, record_id: str, patch: dict[str, Any]) -> dict[str, Any] | None:
        changes = {**strip_reserved(patch), "updated_at": utc_now()}
        try:
            return await self._collection.find_one_and_update(
                {"id": record_id},
                {"$set": changes},
                projection=_PROJECTION,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._map_error(e, changes) from e

    async def delete(self, record_id: str) -> dict[str, Any] | None:
        try:
            return await self._collection.find_one_and_delete({"id": record_id}, projection=_PROJECTION)
        except PyMongoError as e:
            raise self._map_error(e) from e

    def _map_error(self, exc: PyMongoError, document: dict[str, Any] | None = None) -> PersistenceError:
        if isinstance(exc, DuplicateKeyError):
            key_value = (exc.details or {}).get("keyValue") or {}
            if key_value:
                field, value = next(iter(key_value.items()))
            else:
                field = self.unique_fields[0] if self.unique_fields else "id"
                value = (document or {}).get(field)
            return UniqueConstraintError(self.collection, field, value)
        retryable = isinstance(exc, (AutoReconnect, ConnectionFailure))
        logger.error("MongoDB operation failed", collection=self.collection, error_type=type(exc).__name__)
        return PersistenceError(f"MongoDB error on '{self.collection}': {exc}", retryable=retryable)
