"""Catalog API: FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Exactly one storage layout's routers are mounted per app (settings.storage_layout)
    - Global error handlers map CatalogError → {"success": false, "error": ...}
    - Database manager created in the lifespan, stored on app.state, disposed on shutdown
    - A database that cannot be reached at startup raises StartupError and aborts the process

Design Decisions:
    - create_app(settings) factory: tests build apps per layout; uvicorn imports the module-level app
    - Seed catalog loaded in create_app (not the lifespan) so it is available without a running server
    - Both layouts ship, selected by STORAGE_LAYOUT; one app never serves both, so a
      deployment keeps a single schema and its data is never read through the other
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.routes import (
    blob_partners, blob_shop_products, health, partners, shop_products,
)
from catalog.config import Settings, get_settings
from catalog.core.errors import StartupError
from catalog.infrastructure.database import DatabaseSessionManager
from catalog.infrastructure.observability import setup_logging
from catalog.services.seed_catalog import load_seed_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        await db_manager.connect()
    except StartupError:
        await db_manager.dispose()
        raise
    app.state.db_manager = db_manager
    logger.info(
        "Catalog API started",
        extra={"storage_layout": settings.storage_layout},
    )
    yield
    logger.info("Catalog API shutting down")
    await db_manager.dispose()
    app.state.db_manager = None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Catalog API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.seeds = load_seed_catalog(settings.seed_dir)
    app.state.db_manager = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    if settings.storage_layout == "blob":
        app.include_router(blob_partners.router)
        app.include_router(blob_shop_products.router)
    else:
        app.include_router(partners.router)
        app.include_router(shop_products.router)

    register_error_handlers(app, expose_details=settings.expose_error_details)
    return app


app = create_app()
