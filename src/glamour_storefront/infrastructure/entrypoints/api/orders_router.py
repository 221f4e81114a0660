from typing import Any

from fastapi import APIRouter, Body, Depends, status

from glamour_storefront.infrastructure.entrypoints.api.dependencies import get_container
from glamour_storefront.infrastructure.entrypoints.api.responses import success
from glamour_storefront.infrastructure.resolution.container import StorefrontContainer

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("")
async def list_orders(status: str | None = None, container: StorefrontContainer = Depends(get_container)):
    orders = await container.orders.list_orders(status)
    return success(orders, count=len(orders))


@router.post("")
async def place_order(payload: dict[str, Any] = Body(...), container: StorefrontContainer = Depends(get_container)):
    order = await container.orders.place_order(payload)
    return success(order, status.HTTP_201_CREATED, message="Order placed successfully")


# Registered before /{order_id} so "track" is not captured as an id
@router.get("/track")
async def track_order(
    orderId: str | None = None,
    email: str | None = None,
    container: StorefrontContainer = Depends(get_container),
):
    return success(await container.orders.track_order(orderId, email))


@router.get("/{order_id}")
async def get_order(order_id: str, container: StorefrontContainer = Depends(get_container)):
    return success(await container.orders.get_order(order_id))


@router.put("/{order_id}")
async def update_order_status(
    order_id: str,
    payload: dict[str, Any] = Body(...),
    container: StorefrontContainer = Depends(get_container),
):
    return success(await container.orders.update_status(order_id, payload))


@router.delete("/{order_id}")
async def delete_order(order_id: str, container: StorefrontContainer = Depends(get_container)):
    await container.orders.delete_order(order_id)
    return success(None, message="Order deleted")
