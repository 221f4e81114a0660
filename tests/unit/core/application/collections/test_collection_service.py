import pytest

from glamour_storefront.core.application.collections.collection_service import CollectionService
from glamour_storefront.core.exceptions.draft_validation_error import DraftValidationError
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError
from glamour_storefront.infrastructure.persistence.in_memory_document_store import InMemoryDocumentStore


@pytest.fixture
def collections():
    return CollectionService(InMemoryDocumentStore("collections", unique_fields=("name",)))


def summer(**overrides):
    payload = {"name": "Summer Glow", "description": "Light formulas for hot days.", "type": "seasonal"}
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_and_get(collections):
    created = await collections.create_collection(summer())

    fetched = await collections.get_collection(created["id"])

    assert fetched["name"] == "Summer Glow"
    assert fetched["active"] is True


@pytest.mark.asyncio
async def test_names_are_unique(collections):
    await collections.create_collection(summer())

    with pytest.raises(UniqueConstraintError):
        await collections.create_collection(summer(description="Duplicate"))


@pytest.mark.asyncio
async def test_inactive_hidden_by_default(collections):
    hidden = await collections.create_collection(summer(name="Archive", active=False))
    visible = await collections.create_collection(summer(type="makeup", name="Bold Lips"))

    assert [c["id"] for c in await collections.list_collections()] == [visible["id"]]
    assert {c["id"] for c in await collections.list_collections(include_inactive=True)} == {hidden["id"], visible["id"]}
    assert await collections.list_collections("skincare") == []


@pytest.mark.asyncio
async def test_update_and_delete(collections):
    created = await collections.create_collection(summer())

    updated = await collections.update_collection(created["id"], {"active": False})
    assert updated["active"] is False
    assert updated["name"] == "Summer Glow"

    await collections.delete_collection(created["id"])
    with pytest.raises(RecordNotFoundError):
        await collections.delete_collection(created["id"])


@pytest.mark.asyncio
async def test_invalid_type_rejected(collections):
    with pytest.raises(DraftValidationError):
        await collections.create_collection(summer(type="jewellery"))
