"""Resolution endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from swarmresolver.api.dependencies import Resolvers
from swarmresolver.api.schemas import ResolveResponse
from swarmresolver.core.exceptions import ResolverChainEmptyError, SwarmResolverError
from swarmresolver.core.names import DEFAULT_TLD, get_tld

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resolve", tags=["resolve"])


@router.get(
    "/{name}",
    response_model=ResolveResponse,
    operation_id="resolveName",
    summary="Resolve a name",
    description="Resolve a name to a swarm address using the resolver chain for its TLD.",
)
def resolve_name(name: str, resolvers: Resolvers) -> ResolveResponse:
    """Resolve a name to a swarm address."""
    tld = DEFAULT_TLD if resolvers.force_default else get_tld(name)

    try:
        address = resolvers.resolve(name)
    except ResolverChainEmptyError as e:
        raise HTTPException(
            status_code=404,
            detail=f"No resolver configured for TLD {e.tld!r}",
        ) from e
    except SwarmResolverError as e:
        logger.warning(f"Failed to resolve {name!r}: {e}")
        raise HTTPException(status_code=502, detail=e.message) from e

    return ResolveResponse(name=name, tld=tld, address=address.hex())
