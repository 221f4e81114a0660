from unittest.mock import AsyncMock

import pytest

from glamour_storefront.core.application.catalog.product_catalog_service import ProductCatalogService
from glamour_storefront.core.application.catalog.product_ingestion_service import ProductIngestionService
from glamour_storefront.core.application.dtos.operation_result import FailureKind
from glamour_storefront.core.exceptions.persistence_error import PersistenceError
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError


@pytest.fixture
def catalog(container):
    return container.catalog


@pytest.mark.asyncio
async def test_create_product_success(catalog, silk_serum_payload):
    result = await catalog.create_product(silk_serum_payload)

    assert result.success is True
    assert result.data["slug"] == "silk-serum"
    assert result.to_payload() == {"success": True, "data": result.data}


@pytest.mark.asyncio
async def test_create_product_survives_unexpected_ai_errors(catalog, fake_generator):
    fake_generator.seo_reply = RuntimeError("boom")
    fake_generator.description_reply = RuntimeError("boom")

    result = await catalog.create_product({"name": "Silk Serum", "type": "skincare", "price": 10})

    assert result.success is True
    assert result.data["slug"] == "silk-serum"
    assert result.data["description"] is None
    assert result.data["meta_title"].startswith("Silk Serum")


@pytest.mark.asyncio
async def test_validation_failure_skips_ai(catalog, fake_generator):
    result = await catalog.create_product({"name": "  ", "type": "perfume", "price": -1})

    assert result.success is False
    assert result.failure == FailureKind.VALIDATION
    fields = {d["field"] for d in result.details}
    assert {"name", "type", "price"} <= fields
    assert fake_generator.calls == []


@pytest.mark.asyncio
async def test_constraint_violation_is_retryable_conflict(product_store, silk_serum_payload):
    ingestion = AsyncMock(spec=ProductIngestionService)
    ingestion.ingest.side_effect = UniqueConstraintError("products", "slug", "silk-serum")
    catalog = ProductCatalogService(product_store, ingestion)

    result = await catalog.create_product(silk_serum_payload)

    assert result.failure == FailureKind.CONFLICT
    assert result.retryable is True
    assert result.to_payload()["success"] is False


@pytest.mark.asyncio
async def test_storage_failure_is_reported(product_store, silk_serum_payload):
    ingestion = AsyncMock(spec=ProductIngestionService)
    ingestion.ingest.side_effect = PersistenceError("disk full")
    catalog = ProductCatalogService(product_store, ingestion)

    result = await catalog.create_product(silk_serum_payload)

    assert result.failure == FailureKind.STORAGE
    assert result.error == "disk full"


@pytest.mark.asyncio
async def test_update_missing_product(catalog):
    result = await catalog.update_product("nope", {"price": 10})

    assert result.failure == FailureKind.NOT_FOUND


@pytest.mark.asyncio
async def test_list_filters_and_lookup(catalog, silk_serum_payload):
    await catalog.create_product(silk_serum_payload)
    await catalog.create_product({"name": "Oud Nights", "type": "fragrances", "category": "men", "price": 9000})

    men = await catalog.list_products(category="men")
    skincare = await catalog.list_products(product_type="skincare", collection="Summer")
    everything = await catalog.list_products()

    assert [p["name"] for p in men] == ["Oud Nights"]
    assert [p["name"] for p in skincare] == ["Silk Serum"]
    assert [p["name"] for p in everything] == ["Oud Nights", "Silk Serum"]

    by_slug = await catalog.get_product_by_slug("oud-nights")
    assert (await catalog.get_product(by_slug["id"]))["name"] == "Oud Nights"


@pytest.mark.asyncio
async def test_delete_product(catalog, silk_serum_payload):
    created = await catalog.create_product(silk_serum_payload)

    await catalog.delete_product(created.data["id"])

    with pytest.raises(RecordNotFoundError):
        await catalog.get_product(created.data["id"])
    with pytest.raises(RecordNotFoundError):
        await catalog.delete_product(created.data["id"])
