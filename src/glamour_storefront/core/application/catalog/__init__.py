from glamour_storefront.core.application.catalog.product_catalog_service import ProductCatalogService
from glamour_storefront.core.application.catalog.product_ingestion_service import ProductIngestionService
from glamour_storefront.core.application.catalog.unique_slug_resolver import UniqueSlugResolver

__all__ = ["ProductCatalogService", "ProductIngestionService", "UniqueSlugResolver"]
