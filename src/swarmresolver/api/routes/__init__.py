"""API route modules."""

from swarmresolver.api.routes.health import router as health_router
from swarmresolver.api.routes.resolve import router as resolve_router

__all__ = [
    "health_router",
    "resolve_router",
]
