from __future__ import annotations

from typing import Any

from glamour_storefront.core.application.dtos.payload_validation import validate_payload
from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.domain.collections.collection import Collection, CollectionDraft, CollectionPatch
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError


def _to_payload(record: dict[str, Any]) -> dict[str, Any]:
    return Collection.model_validate(record).model_dump(mode="json")


class CollectionService:
    def __init__(self, store: DocumentStorePort):
        self.store = store

    async def list_collections(self, collection_type: str | None = None, include_inactive: bool = False) -> list[dict[str, Any]]:
        record_filter = RecordFilter.where(type=collection_type, active=None if include_inactive else True)
        return [_to_payload(r) for r in await self.store.find_many(record_filter)]

    async def get_collection(self, collection_id: str) -> dict[str, Any]:
        record = await self.store.find_one(RecordFilter.where(id=collection_id))
        if record is None:
            raise RecordNotFoundError("Collection", collection_id)
        return _to_payload(record)

    async def create_collection(self, payload: dict[str, Any]) -> dict[str, Any]:
        draft = validate_payload(CollectionDraft, payload)
        return _to_payload(await self.store.insert(draft.model_dump(mode="json")))

    async def update_collection(self, collection_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        patch = validate_payload(CollectionPatch, payload)
        record = await self.store.update(collection_id, patch.model_dump(mode="json", exclude_unset=True, exclude_none=True))
        if record is None:
            raise RecordNotFoundError("Collection", collection_id)
        return _to_payload(record)

    async def delete_collection(self, collection_id: str) -> None:
        if await self.store.delete(collection_id) is None:
            raise RecordNotFoundError("Collection", collection_id)
