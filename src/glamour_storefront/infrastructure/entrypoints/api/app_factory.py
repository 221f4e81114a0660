from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from glamour_storefront.core.exceptions.draft_validation_error import DraftValidationError
from glamour_storefront.core.exceptions.persistence_error import PersistenceError
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError
from glamour_storefront.infrastructure.configuration.main_settings import Settings
from glamour_storefront.infrastructure.entrypoints.api.ai_router import router as ai_router
from glamour_storefront.infrastructure.entrypoints.api.collections_router import router as collections_router
from glamour_storefront.infrastructure.entrypoints.api.contact_router import router as contact_router
from glamour_storefront.infrastructure.entrypoints.api.health_router import router as health_router
from glamour_storefront.infrastructure.entrypoints.api.listing_cache import ListingCache
from glamour_storefront.infrastructure.entrypoints.api.orders_router import router as orders_router
from glamour_storefront.infrastructure.entrypoints.api.products_router import router as products_router
from glamour_storefront.infrastructure.entrypoints.api.responses import failure
from glamour_storefront.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
    configure_logging,
)
from glamour_storefront.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from glamour_storefront.infrastructure.resolution.container import StorefrontContainer, build_container

logger = LoggerFactoryService.build_logger(__name__)


def create_app(settings: Settings, container: StorefrontContainer | None = None) -> FastAPI:
    configure_logging(settings.log_level)

    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name}")
    logger.info(f"Store backend: {settings.store_backend.value}")
    logger.info(f"AI SEO enabled: {settings.ai_enabled} (model={settings.groq_model})")
    logger.info("------------------------")

    container = container or build_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await container.startup()
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.container = container
    app.state.listing_cache = ListingCache(ttl_s=settings.listing_cache_ttl_s)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error(f"Validation error for request {request.url}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"success": False, "error": "Invalid request", "detail": jsonable_errors(exc)},
        )

    @app.exception_handler(DraftValidationError)
    async def draft_validation_handler(request: Request, exc: DraftValidationError):
        return failure(exc.message, status.HTTP_400_BAD_REQUEST, details=exc.details)

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError):
        return failure(f"{exc.entity} not found", status.HTTP_404_NOT_FOUND)

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError):
        if isinstance(exc, UniqueConstraintError):
            return failure(exc.message, status.HTTP_409_CONFLICT, retryable=True)
        logger.error(f"Storage failure on {request.method} {request.url.path}: {exc.message}")
        return failure("Storage failure", status.HTTP_500_INTERNAL_SERVER_ERROR, retryable=exc.retryable)

    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(ai_router)
    app.include_router(collections_router)
    app.include_router(orders_router)
    app.include_router(contact_router)

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")} for err in exc.errors()]
