"""FastAPI application factory and entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI

from quickpage.api.middleware import CorrelationIdMiddleware, add_exception_handlers
from quickpage.api.routes import catalog, previews, share, system
from quickpage.cache import PreviewCache
from quickpage.config import Settings
from quickpage.logging import configure_logging
from quickpage.orchestrator import PreviewRunner

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize settings, runner and optional cache on startup."""
    settings = Settings()

    configure_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
    )

    app.state.settings = settings
    app.state.runner = PreviewRunner(settings)
    app.state.cache = PreviewCache(settings) if settings.cache_configured else None

    logger.info(
        "quickpage API started",
        host=settings.api_host,
        port=settings.api_port,
        cache_enabled=app.state.cache is not None,
    )
    yield

    logger.info("quickpage API shut down")


def create_app() -> FastAPI:
    """Application factory."""
    app = FastAPI(
        title="quickpage",
        description="Idea-to-page preview generation API",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(CorrelationIdMiddleware)
    add_exception_handlers(app)

    # Prometheus metrics endpoint
    from prometheus_client import make_asgi_app

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    # Mount routes under /api/v1
    prefix = "/api/v1"
    app.include_router(system.router, prefix=prefix)
    app.include_router(previews.router, prefix=prefix)
    app.include_router(catalog.router, prefix=prefix)
    app.include_router(share.router, prefix=prefix)

    return app


def main() -> None:
    """Entry point for `quickpage-api` command."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "quickpage.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )
