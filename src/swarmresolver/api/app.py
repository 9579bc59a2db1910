"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI

from swarmresolver import __version__
from swarmresolver.api.routes import health_router, resolve_router
from swarmresolver.client import ResolverClient
from swarmresolver.config import get_settings

if TYPE_CHECKING:
    from swarmresolver.config import ResolverSettings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Connects the name service clients on startup and closes them on
    shutdown. A resolver client attached before startup is used as is and
    left open.
    """
    owned = getattr(app.state, "resolver_client", None) is None
    if owned:
        settings: ResolverSettings = getattr(app.state, "settings", None) or get_settings()
        logger.info("Initializing resolver client...")
        client = ResolverClient(settings)
        client.open()
        app.state.resolver_client = client

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    if owned:
        app.state.resolver_client.close()
        app.state.resolver_client = None

    logger.info("Application shutdown complete")


def create_app(
    *,
    resolver_client: ResolverClient | None = None,
    settings: ResolverSettings | None = None,
    title: str = "Swarm Resolver API",
    description: str = "Resolve names to swarm content addresses",
    version: str = __version__,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        resolver_client: Pre-opened resolver client; built from settings if omitted
        settings: Settings used to build the resolver client
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.resolver_client = resolver_client
    app.state.settings = settings

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(resolve_router, prefix="/api/v1")

    return app
