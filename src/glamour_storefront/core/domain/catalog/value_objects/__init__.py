from glamour_storefront.core.domain.catalog.value_objects.product_category import ProductCategory
from glamour_storefront.core.domain.catalog.value_objects.product_type import ProductType
from glamour_storefront.core.domain.catalog.value_objects.seo_bundle import SeoBundle

__all__ = ["ProductCategory", "ProductType", "SeoBundle"]
