"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import (
    auth_router,
    books_router,
    catalog_router,
    common_router,
    me_router,
)
from api.services.app_initializer import AppServiceInitializer
from api.utils.error_handler import register_error_handlers
from core import get_logger, setup_logging, setup_production_logging
from core.config import Settings, load_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    if settings.is_production:
        setup_production_logging(level=settings.log_level)
    else:
        setup_logging(
            level=settings.log_level,
            enable_file_logging=not settings.is_testing,
        )
    logger.info(f"Starting Bookshelf API server in {settings.environment} mode")

    initializer = AppServiceInitializer(settings)
    await initializer.initialize_all_services(app)

    logger.info("Bookshelf API server initialized successfully")

    yield

    await initializer.shutdown_all_services()
    logger.info("Bookshelf API server shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI app with the given or current settings."""
    settings = settings or load_settings()

    app = FastAPI(
        title=settings.api_title,
        description="Backend API for the Bookshelf reading tracker",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(common_router)
    app.include_router(auth_router)
    app.include_router(me_router)
    app.include_router(books_router)
    app.include_router(catalog_router)
    return app


app = create_app()
