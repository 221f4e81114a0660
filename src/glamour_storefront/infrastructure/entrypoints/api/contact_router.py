from typing import Any

from fastapi import APIRouter, Body, Depends, status

from glamour_storefront.infrastructure.entrypoints.api.dependencies import get_container
from glamour_storefront.infrastructure.entrypoints.api.responses import success
from glamour_storefront.infrastructure.resolution.container import StorefrontContainer

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("")
async def submit_message(payload: dict[str, Any] = Body(...), container: StorefrontContainer = Depends(get_container)):
    message = await container.contact.submit(payload)
    return success(message, status.HTTP_201_CREATED, message="Message sent successfully")


@router.get("")
async def list_messages(status: str | None = None, container: StorefrontContainer = Depends(get_container)):
    messages = await container.contact.list_messages(status)
    return success(messages, count=len(messages))


@router.put("/{message_id}")
async def update_message_status(
    message_id: str,
    payload: dict[str, Any] = Body(...),
    container: StorefrontContainer = Depends(get_container),
):
    return success(await container.contact.update_status(message_id, payload))
