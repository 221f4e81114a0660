from typing import Any

from fastapi import APIRouter, Body, Depends, status

from glamour_storefront.infrastructure.entrypoints.api.dependencies import get_container
from glamour_storefront.infrastructure.entrypoints.api.responses import success
from glamour_storefront.infrastructure.resolution.container import StorefrontContainer

router = APIRouter(prefix="/api/collections", tags=["collections"])


@router.get("")
async def list_collections(
    type: str | None = None,
    include_inactive: bool = False,
    container: StorefrontContainer = Depends(get_container),
):
    collections = await container.collections.list_collections(type, include_inactive=include_inactive)
    return success(collections, count=len(collections))


@router.post("")
async def create_collection(payload: dict[str, Any] = Body(...), container: StorefrontContainer = Depends(get_container)):
    return success(await container.collections.create_collection(payload), status.HTTP_201_CREATED)


@router.get("/{collection_id}")
async def get_collection(collection_id: str, container: StorefrontContainer = Depends(get_container)):
    return success(await container.collections.get_collection(collection_id))


@router.put("/{collection_id}")
async def update_collection(
    collection_id: str,
    payload: dict[str, Any] = Body(...),
    container: StorefrontContainer = Depends(get_container),
):
    return success(await container.collections.update_collection(collection_id, payload))


@router.delete("/{collection_id}")
async def delete_collection(collection_id: str, container: StorefrontContainer = Depends(get_container)):
    await container.collections.delete_collection(collection_id)
    return success(None, message="Collection deleted")
