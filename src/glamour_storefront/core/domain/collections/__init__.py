from glamour_storefront.core.domain.collections.collection import (
    Collection,
    CollectionDraft,
    CollectionPatch,
    CollectionType,
)

__all__ = ["Collection", "CollectionDraft", "CollectionPatch", "CollectionType"]
