"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from swarmresolver.resolution.multi import MultiResolver


def get_multi_resolver(request: Request) -> MultiResolver:
    """Get the MultiResolver of the app's resolver client."""
    client = getattr(request.app.state, "resolver_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Resolver not initialized")
    return client.multi_resolver


# Type aliases for cleaner dependency injection
Resolvers = Annotated[MultiResolver, Depends(get_multi_resolver)]
