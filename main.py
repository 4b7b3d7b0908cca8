"""
Menu Catalog FastAPI Application
Main entry point: app factory, lifespan, middleware and startup checks
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from functools import partial
from typing import Optional
import logging
import sys

import anyio
import uvicorn

from api.routes import health, menu
from api.static import UploadStaticFiles
from adapters import mongo_adapter
from adapters.blob_store import BlobStore
from app.config import Settings, settings
from api.middleware import (
    RequestLoggingMiddleware,
    menu_catalog_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler,
)
from app.exceptions import ConnectionFailed, MenuCatalogError
from repositories.menu_repository import MenuRepository
from services.menu_service import UPLOADS_PATH

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("menucatalog.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Connects to MongoDB before the server accepts requests; a failure is
    fatal and no retry is attempted.
    """
    cfg: Settings = app.state.settings
    _logger.info(f"Starting {cfg.app_name} in {cfg.environment.value} mode")

    try:
        client = await anyio.to_thread.run_sync(
            partial(mongo_adapter.connect, cfg.mongo_uri, cfg.mongo_timeout_ms)
        )
    except ConnectionFailed as exc:
        _logger.critical("Cannot start without MongoDB: %s", exc)
        raise

    app.state.mongo_client = client
    app.state.menu_repository = MenuRepository(
        mongo_adapter.get_collection(client, cfg.mongo_db_name, cfg.menu_collection)
    )

    try:
        yield
    finally:
        _logger.info(f"Shutting down {cfg.app_name}")
        mongo_adapter.close(client)


def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    cfg = cfg or settings

    application = FastAPI(
        title=cfg.api_title,
        version=cfg.app_version,
        description=cfg.api_description,
        lifespan=lifespan,
        debug=cfg.debug,
        openapi_url="/openapi.json" if not cfg.is_production() else None,
        docs_url="/docs" if not cfg.is_production() else None,
        redoc_url="/redoc" if not cfg.is_production() else None,
    )
    application.state.settings = cfg
    application.state.blob_store = BlobStore(cfg.upload_dir, cfg.max_upload_bytes)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=cfg.cors_allow_credentials,
        allow_methods=cfg.cors_allow_methods,
        allow_headers=cfg.cors_allow_headers,
    )
    application.add_middleware(RequestLoggingMiddleware)

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(MenuCatalogError, menu_catalog_exception_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    application.include_router(health.router)
    application.include_router(menu.router)

    # Upload directory is created on first store, so don't require it here
    application.mount(
        UPLOADS_PATH,
        UploadStaticFiles(cfg.upload_dir),
        name="uploads",
    )
    return application


app = create_app()


def run(cfg: Optional[Settings] = None):
    """Start the server for ``cfg``; exits with status 1 before binding if MONGO_URI is unset."""
    cfg = cfg or settings
    if not cfg.mongo_uri:
        _logger.critical("MONGO_URI is not set; refusing to start")
        sys.exit(1)

    reload = cfg.debug and cfg.is_development()
    # the reloader needs an import string, which always loads the global settings
    target = "main:app" if reload else create_app(cfg)

    uvicorn.run(
        target,
        host=cfg.host,
        port=cfg.port,
        reload=reload,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    run()
