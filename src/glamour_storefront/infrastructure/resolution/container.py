from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from glamour_storefront.core.application.catalog.product_catalog_service import ProductCatalogService
from glamour_storefront.core.application.catalog.product_ingestion_service import (
    ProductIngestionService,
    is_slug_conflict,
)
from glamour_storefront.core.application.catalog.unique_slug_resolver import UniqueSlugResolver
from glamour_storefront.core.application.collections.collection_service import CollectionService
from glamour_storefront.core.application.contact.contact_service import ContactService
from glamour_storefront.core.application.orders.order_service import OrderService
from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.text_generation_port import TextGenerationPort
from glamour_storefront.core.application.seo.ai_description_writer import AiDescriptionWriter
from glamour_storefront.core.application.seo.seo_content_synthesizer import SeoContentSynthesizer
from glamour_storefront.core.domain.store_profile import StoreProfile
from glamour_storefront.infrastructure.common.retry.retry_policy import RetryPolicy
from glamour_storefront.infrastructure.configuration.main_settings import Settings
from glamour_storefront.infrastructure.configuration.store_profile_loader import load_store_profile
from glamour_storefront.infrastructure.configuration.store_settings import StoreBackend
from glamour_storefront.infrastructure.drivers.llms.groq.clients.groq_client_factory import GroqClientFactory
from glamour_storefront.infrastructure.drivers.llms.groq.clients.groq_config import GroqConfig
from glamour_storefront.infrastructure.drivers.llms.groq.groq_text_generation_adapter import (
    GroqTextGenerationAdapter,
)
from glamour_storefront.infrastructure.drivers.llms.unconfigured_text_generation_adapter import (
    UnconfiguredTextGenerationAdapter,
)
from glamour_storefront.infrastructure.observability.logger_factory_service import get_logger
from glamour_storefront.infrastructure.persistence.in_memory_document_store import InMemoryDocumentStore
from glamour_storefront.infrastructure.persistence.json_file_document_store import JsonFileDocumentStore

# collection name -> unique fields
COLLECTIONS: dict[str, tuple[str, ...]] = {
    "products": ("slug",),
    "collections": ("name",),
    "orders": ("order_number",),
    "contacts": (),
}


@dataclass
class StorefrontStores:
    products: DocumentStorePort
    collections: DocumentStorePort
    orders: DocumentStorePort
    contacts: DocumentStorePort

    def all(self) -> Iterable[DocumentStorePort]:
        return (self.products, self.collections, self.orders, self.contacts)


@dataclass
class StorefrontContainer:
    """Everything the API layer needs, wired once per application."""

    settings: Settings
    profile: StoreProfile
    stores: StorefrontStores
    text_generator: TextGenerationPort
    description_writer: AiDescriptionWriter
    catalog: ProductCatalogService
    collections: CollectionService
    orders: OrderService
    contact: ContactService

    async def startup(self) -> None:
        for store in self.stores.all():
            ensure_indexes = getattr(store, "ensure_indexes", None)
            if ensure_indexes is not None:
                await ensure_indexes()


def build_stores(settings: Settings) -> StorefrontStores:
    backend = settings.store_backend
    if backend == StoreBackend.MONGO:
        # Imported lazily so memory/file deployments never touch the driver
        from motor.motor_asyncio import AsyncIOMotorClient

        from glamour_storefront.infrastructure.persistence.mongo_document_store import MongoDocumentStore

        database = AsyncIOMotorClient(settings.mongo_url)[settings.mongo_database]
        stores = {name: MongoDocumentStore(database, name, unique) for name, unique in COLLECTIONS.items()}
    elif backend == StoreBackend.FILE:
        stores = {
            name: JsonFileDocumentStore(settings.runtime_data_dir, name, unique)
            for name, unique in COLLECTIONS.items()
        }
    else:
        stores = {name: InMemoryDocumentStore(name, unique) for name, unique in COLLECTIONS.items()}
    return StorefrontStores(**stores)


def build_text_generator(settings: Settings) -> TextGenerationPort:
    if not settings.ai_enabled:
        get_logger("container").warning("GROQ_API_KEY not set, SEO content will use templates")
        return UnconfiguredTextGenerationAdapter()

    config = GroqConfig.from_settings(settings)
    return GroqTextGenerationAdapter(
        client=GroqClientFactory(config).create(),
        model=config.model,
        retry=RetryPolicy(max_attempts=settings.llm_max_attempts),
    )


def build_container(
    settings: Settings,
    stores: StorefrontStores | None = None,
    text_generator: TextGenerationPort | None = None,
) -> StorefrontContainer:
    profile = load_store_profile(settings.store_profile_path)
    stores = stores or build_stores(settings)
    text_generator = text_generator or build_text_generator(settings)

    synthesizer = SeoContentSynthesizer(text_generator, profile, timeout_s=settings.llm_timeout_s)
    description_writer = AiDescriptionWriter(text_generator, profile, timeout_s=settings.llm_timeout_s)
    ingestion = ProductIngestionService(
        store=stores.products,
        synthesizer=synthesizer,
        resolver=UniqueSlugResolver(stores.products),
        description_writer=description_writer,
        conflict_retry=RetryPolicy(
            max_attempts=settings.slug_conflict_max_attempts,
            initial_wait_s=0.01,
            max_wait_s=0.2,
            retry_on=is_slug_conflict,
        ),
    )

    return StorefrontContainer(
        settings=settings,
        profile=profile,
        stores=stores,
        text_generator=text_generator,
        description_writer=description_writer,
        catalog=ProductCatalogService(stores.products, ingestion),
        collections=CollectionService(stores.collections),
        orders=OrderService(stores.orders, profile),
        contact=ContactService(stores.contacts),
    )
