"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer et configurer l'application FastAPI.

Usage:
------
    # Development
    uvicorn portfolio_backup.presentation.api.main:create_app --factory --reload

    # Production
    uvicorn portfolio_backup.presentation.api.main:create_app --factory --host 0.0.0.0 --port 8000
"""

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from portfolio_backup.infrastructure.backup.config import get_backup_settings
from portfolio_backup.infrastructure.container import Container
from portfolio_backup.infrastructure.logging import configure_logging, get_logger
from portfolio_backup.infrastructure.logging.config import RequestLogger
from portfolio_backup.presentation.api.backups.router import router as backups_router
from portfolio_backup.presentation.api.config import APISettings, get_settings


def create_app(
    settings: Optional[APISettings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        settings: Configuration API (defaut: variables d'env).
        container: Dependances de backup (defaut: construites depuis l'env).

    Returns:
        Application FastAPI configuree.
    """
    settings = settings or get_settings()
    container = container or Container.create(get_backup_settings())
    backup_settings = container.settings

    is_production = os.getenv("ENV", "development") == "production"
    configure_logging(
        json_logs=is_production or backup_settings.json_logs,
        log_level=backup_settings.log_level,
    )
    logger = get_logger("api")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if backup_settings.auto_backup_enabled:
            container.scheduler.start()
        yield
        container.scheduler.stop()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.container = container
    app.dependency_overrides[get_settings] = lambda: settings

    # Request logging middleware
    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    logger.info("app_started", version=settings.api_version)

    @app.get("/health", tags=["Health"])
    def health():
        """Endpoint de sante."""
        return {
            "status": "healthy",
            "automatic_backups": container.scheduler.is_running,
        }

    app.include_router(backups_router, prefix=settings.api_prefix)

    return app
