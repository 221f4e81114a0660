from __future__ import annotations

import logging
from typing import Any

from glamour_storefront.core.application.catalog.product_ingestion_service import ProductIngestionService
from glamour_storefront.core.application.dtos.operation_result import FailureKind, OperationResult
from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.domain.catalog.product import Product, ProductDraft, ProductPatch
from glamour_storefront.core.exceptions.draft_validation_error import DraftValidationError
from glamour_storefront.core.exceptions.persistence_error import PersistenceError
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError

logger = logging.getLogger(__name__)


def _to_payload(product: Product) -> dict[str, Any]:
    return product.model_dump(mode="json")


class ProductCatalogService:
    """Caller-facing product operations. Creation and update report outcomes as OperationResult."""

    def __init__(self, store: DocumentStorePort, ingestion: ProductIngestionService):
        self.store = store
        self.ingestion = ingestion

    async def create_product(self, payload: dict[str, Any]) -> OperationResult:
        try:
            draft = ProductDraft.from_payload(payload)
            product = await self.ingestion.ingest(draft)
        except DraftValidationError as e:
            return OperationResult.fail(e.message, FailureKind.VALIDATION, details=e.details)
        except PersistenceError as e:
            return self._persistence_failure("create", e)
        return OperationResult.ok(_to_payload(product))

    async def update_product(
        self, product_id: str, payload: dict[str, Any], regenerate_seo: bool = False
    ) -> OperationResult:
        try:
            patch = ProductPatch.from_payload(payload)
            product = await self.ingestion.update(product_id, patch, regenerate_seo=regenerate_seo)
        except DraftValidationError as e:
            return OperationResult.fail(e.message, FailureKind.VALIDATION, details=e.details)
        except RecordNotFoundError:
            return OperationResult.fail("Product not found", FailureKind.NOT_FOUND)
        except PersistenceError as e:
            return self._persistence_failure("update", e)
        return OperationResult.ok(_to_payload(product))

    async def list_products(
        self,
        collection: str | None = None,
        product_type: str | None = None,
        category: str | None = None,
        slug: str | None = None,
    ) -> list[dict[str, Any]]:
        record_filter = RecordFilter.where(collection=collection, type=product_type, category=category, slug=slug)
        records = await self.store.find_many(record_filter)
        return [_to_payload(Product.model_validate(r)) for r in records]

    async def get_product(self, product_id: str) -> dict[str, Any]:
        record = await self.store.find_one(RecordFilter.where(id=product_id))
        if record is None:
            raise RecordNotFoundError("Product", product_id)
        return _to_payload(Product.model_validate(record))

    async def get_product_by_slug(self, slug: str) -> dict[str, Any]:
        record = await self.store.find_one(RecordFilter.where(slug=slug))
        if record is None:
            raise RecordNotFoundError("Product", slug)
        return _to_payload(Product.model_validate(record))

    async def delete_product(self, product_id: str) -> dict[str, Any]:
        record = await self.store.delete(product_id)
        if record is None:
            raise RecordNotFoundError("Product", product_id)
        logger.info("Product %s deleted", product_id)
        return _to_payload(Product.model_validate(record))

    @staticmethod
    def _persistence_failure(action: str, exc: PersistenceError) -> OperationResult:
        logger.error("Failed to %s product: %s", action, exc.message)
        if isinstance(exc, UniqueConstraintError):
            return OperationResult.fail(exc.message, FailureKind.CONFLICT, retryable=True)
        return OperationResult.fail(exc.message, FailureKind.STORAGE, retryable=exc.retryable)
