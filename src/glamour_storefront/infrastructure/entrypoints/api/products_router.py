from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, Query, status

from glamour_storefront.infrastructure.entrypoints.api.dependencies import get_container, get_listing_cache
from glamour_storefront.infrastructure.entrypoints.api.listing_cache import ListingCache
from glamour_storefront.infrastructure.entrypoints.api.responses import from_result, success
from glamour_storefront.infrastructure.resolution.container import StorefrontContainer

logger = structlog.get_logger()
router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products(
    collection: str | None = None,
    type: str | None = None,
    category: str | None = None,
    slug: str | None = None,
    container: StorefrontContainer = Depends(get_container),
    cache: ListingCache = Depends(get_listing_cache),
):
    key = (collection, type, category, slug)
    products = cache.get(key)
    cached = products is not None
    if not cached:
        products = await container.catalog.list_products(
            collection=collection, product_type=type, category=category, slug=slug
        )
        cache.put(key, products)
    return success(products, count=len(products), cached=cached)


@router.post("")
async def create_product(
    payload: dict[str, Any] = Body(...),
    container: StorefrontContainer = Depends(get_container),
    cache: ListingCache = Depends(get_listing_cache),
):
    result = await container.catalog.create_product(payload)
    if result.success:
        cache.invalidate()
    else:
        logger.warning("Product creation rejected", error=result.error, failure=result.failure)
    return from_result(result, success_status=status.HTTP_201_CREATED)


@router.get("/slug/{slug}")
async def get_product_by_slug(slug: str, container: StorefrontContainer = Depends(get_container)):
    return success(await container.catalog.get_product_by_slug(slug))


@router.get("/{product_id}")
async def get_product(product_id: str, container: StorefrontContainer = Depends(get_container)):
    return success(await container.catalog.get_product(product_id))


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    payload: dict[str, Any] = Body(...),
    regenerate_seo: bool = Query(default=False),
    container: StorefrontContainer = Depends(get_container),
    cache: ListingCache = Depends(get_listing_cache),
):
    # the flag may also travel inside the body
    regenerate_seo = bool(payload.pop("regenerate_seo", regenerate_seo))
    result = await container.catalog.update_product(product_id, payload, regenerate_seo=regenerate_seo)
    if result.success:
        cache.invalidate()
    return from_result(result)


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    container: StorefrontContainer = Depends(get_container),
    cache: ListingCache = Depends(get_listing_cache),
):
    deleted = await container.catalog.delete_product(product_id)
    cache.invalidate()
    return success(deleted, message="Product deleted")
