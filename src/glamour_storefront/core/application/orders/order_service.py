from __future__ import annotations

import logging
import time
from typing import Any

from glamour_storefront.core.application.dtos.payload_validation import validate_payload
from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.domain.sales.order import Order, OrderRequest, OrderStatusUpdate
from glamour_storefront.core.domain.store_profile import StoreProfile
from glamour_storefront.core.exceptions.draft_validation_error import DraftValidationError
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError
from glamour_storefront.infrastructure.common.retry.retry_policy import RetryPolicy

logger = logging.getLogger(__name__)


def _is_order_number_conflict(exc: BaseException) -> bool:
    return isinstance(exc, UniqueConstraintError) and exc.field == "order_number"


class OrderService:
    def __init__(self, store: DocumentStorePort, profile: StoreProfile, retry: RetryPolicy | None = None):
        self.store = store
        self.profile = profile
        self.retry = retry or RetryPolicy(
            max_attempts=3, initial_wait_s=0.01, max_wait_s=0.1, retry_on=_is_order_number_conflict
        )

    async def place_order(self, payload: dict[str, Any]) -> dict[str, Any]:
        request = validate_payload(OrderRequest, payload)
        record = {**request.model_dump(mode="json"), **self.compute_totals(request), "status": "pending"}

        async def insert() -> dict[str, Any]:
            return await self.store.insert({**record, "order_number": await self._next_order_number()})

        stored = await self.retry.run(insert)
        logger.info("Order %s placed (%d items, total %s)", stored["order_number"], len(request.items), stored["total_amount"])
        return Order.model_validate(stored).model_dump(mode="json")

    def compute_totals(self, request: OrderRequest) -> dict[str, float]:
        subtotal = request.subtotal
        shipping = float(self.profile.shipping_fee)
        tax = float(round(subtotal * self.profile.tax_rate))
        return {
            "subtotal_amount": subtotal,
            "shipping_fee": shipping,
            "tax_amount": tax,
            "total_amount": round(subtotal + shipping + tax, 2),
        }

    async def list_orders(self, status: str | None = None) -> list[dict[str, Any]]:
        records = await self.store.find_many(RecordFilter.where(status=status))
        return [Order.model_validate(r).model_dump(mode="json") for r in records]

    async def get_order(self, order_id: str) -> dict[str, Any]:
        record = await self.store.find_one(RecordFilter.where(id=order_id))
        if record is None:
            raise RecordNotFoundError("Order", order_id)
        return Order.model_validate(record).model_dump(mode="json")

    async def track_order(self, order_id: str | None = None, email: str | None = None) -> dict[str, Any]:
        """Look up an order by id or order number, by customer email, or by both (must agree)."""
        order_id = (order_id or "").strip() or None
        email = (email or "").strip().lower() or None
        if order_id is None and email is None:
            raise DraftValidationError("Either order id or email is required")

        if order_id is not None:
            record = await self.store.find_one(RecordFilter.where(id=order_id))
            if record is None:
                record = await self.store.find_one(RecordFilter.where(order_number=order_id))
            if record is not None and email is not None and record.get("email") != email:
                record = None
        else:
            matches = await self.store.find_many(RecordFilter.where(email=email), limit=1)
            record = matches[0] if matches else None

        if record is None:
            raise RecordNotFoundError("Order", order_id or email or "")
        return Order.model_validate(record).model_dump(mode="json")

    async def update_status(self, order_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        update = validate_payload(OrderStatusUpdate, payload)
        record = await self.store.update(order_id, {"status": update.status.value})
        if record is None:
            raise RecordNotFoundError("Order", order_id)
        logger.info("Order %s moved to %s", order_id, update.status.value)
        return Order.model_validate(record).model_dump(mode="json")

    async def delete_order(self, order_id: str) -> None:
        if await self.store.delete(order_id) is None:
            raise RecordNotFoundError("Order", order_id)

    async def _next_order_number(self) -> str:
        count = await self.store.count()
        return f"ORD-{int(time.time() * 1000)}-{count + 1}"
