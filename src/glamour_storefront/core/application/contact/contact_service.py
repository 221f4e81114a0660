from __future__ import annotations

import logging
from typing import Any

from glamour_storefront.core.application.dtos.payload_validation import validate_payload
from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.domain.contact.contact_message import (
    ContactMessage,
    ContactStatus,
    ContactStatusUpdate,
    ContactSubmission,
)
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, store: DocumentStorePort):
        self.store = store

    async def submit(self, payload: dict[str, Any]) -> dict[str, Any]:
        submission = validate_payload(ContactSubmission, payload)
        record = await self.store.insert({**submission.model_dump(mode="json"), "status": ContactStatus.NEW.value})
        logger.info("Contact message %s received", record["id"])
        return ContactMessage.model_validate(record).model_dump(mode="json")

    async def list_messages(self, status: str | None = None) -> list[dict[str, Any]]:
        records = await self.store.find_many(RecordFilter.where(status=status))
        return [ContactMessage.model_validate(r).model_dump(mode="json") for r in records]

    async def update_status(self, message_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        update = validate_payload(ContactStatusUpdate, payload)
        record = await self.store.update(message_id, {"status": update.status.value})
        if record is None:
            raise RecordNotFoundError("Contact message", message_id)
        return ContactMessage.model_validate(record).model_dump(mode="json")
