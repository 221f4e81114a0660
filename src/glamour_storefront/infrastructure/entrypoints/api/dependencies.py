from fastapi import Request

from glamour_storefront.infrastructure.entrypoints.api.listing_cache import ListingCache
from glamour_storefront.infrastructure.resolution.container import StorefrontContainer


def get_container(request: Request) -> StorefrontContainer:
    return request.app.state.container


def get_listing_cache(request: Request) -> ListingCache:
    return request.app.state.listing_cache
