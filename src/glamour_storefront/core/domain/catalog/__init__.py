from glamour_storefront.core.domain.catalog.product import Product, ProductDraft, ProductPatch

__all__ = ["Product", "ProductDraft", "ProductPatch"]
