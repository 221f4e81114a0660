import asyncio

import pytest

from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError
from glamour_storefront.infrastructure.persistence.in_memory_document_store import InMemoryDocumentStore


@pytest.fixture
def store():
    return InMemoryDocumentStore("products", unique_fields=("slug",))


@pytest.mark.asyncio
async def test_insert_assigns_identity_and_timestamps(store):
    record = await store.insert({"name": "Kajal", "slug": "kajal", "id": "client-id"})

    assert record["id"] != "client-id"
    assert len(record["id"]) == 32
    assert record["created_at"] == record["updated_at"]
    assert record["created_at"].tzinfo is not None


@pytest.mark.asyncio
async def test_unique_field_enforced_on_insert_and_update(store):
    first = await store.insert({"slug": "kajal"})
    second = await store.insert({"slug": "kajal-1"})

    with pytest.raises(UniqueConstraintError) as exc_info:
        await store.insert({"slug": "kajal"})
    assert (exc_info.value.field, exc_info.value.value) == ("slug", "kajal")

    with pytest.raises(UniqueConstraintError):
        await store.update(second["id"], {"slug": "kajal"})

    # updating a record to its own value is not a conflict
    assert (await store.update(first["id"], {"slug": "kajal"}))["slug"] == "kajal"


@pytest.mark.asyncio
async def test_concurrent_inserts_of_same_slug(store):
    results = await asyncio.gather(*(store.insert({"slug": "same"}) for _ in range(3)), return_exceptions=True)

    assert sum(isinstance(r, dict) for r in results) == 1
    assert sum(isinstance(r, UniqueConstraintError) for r in results) == 2


@pytest.mark.asyncio
async def test_filters_and_ordering(store):
    a = await store.insert({"slug": "a", "type": "makeup"})
    b = await store.insert({"slug": "b", "type": "makeup"})
    await store.insert({"slug": "c", "type": "skincare"})

    makeup = await store.find_many(RecordFilter.where(type="makeup"))
    assert [r["id"] for r in makeup] == [b["id"], a["id"]]

    others = await store.find_many(RecordFilter.where(type="makeup").excluding(id=b["id"]))
    assert [r["id"] for r in others] == [a["id"]]

    assert await store.count() == 3
    assert await store.count(RecordFilter.where(type="skincare")) == 1
    assert len(await store.find_many(limit=2)) == 2


@pytest.mark.asyncio
async def test_returned_records_are_copies(store):
    record = await store.insert({"slug": "a", "sizes": ["S"]})
    record["sizes"].append("M")

    stored = await store.find_one(RecordFilter.where(id=record["id"]))
    assert stored["sizes"] == ["S"]


@pytest.mark.asyncio
async def test_update_and_delete_missing(store):
    assert await store.update("missing", {"slug": "x"}) is None
    assert await store.delete("missing") is None


@pytest.mark.asyncio
async def test_update_cannot_overwrite_identity(store):
    record = await store.insert({"slug": "a"})

    updated = await store.update(record["id"], {"id": "hijack", "created_at": None, "name": "A"})

    assert updated["id"] == record["id"]
    assert updated["created_at"] == record["created_at"]
    assert updated["updated_at"] >= record["updated_at"]
