"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from swarmresolver import __version__
from swarmresolver.api.schemas import ChainStatus, HealthResponse, ReadyResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its resolver chains.",
)
def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    client = getattr(request.app.state, "resolver_client", None)
    if client is None:
        return HealthResponse(status="unhealthy", version=__version__)

    multi_resolver = client.multi_resolver
    chains = [
        ChainStatus(tld=tld, resolvers=multi_resolver.chain_count(tld))
        for tld in multi_resolver.tlds
    ]

    status: Literal["healthy", "degraded", "unhealthy"] = "healthy"
    if not any(chain.resolvers for chain in chains):
        status = "degraded"

    return HealthResponse(status=status, version=__version__, chains=chains)


@router.get(
    "/ready",
    response_model=ReadyResponse,
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
def readiness_check(request: Request) -> ReadyResponse:
    """Ready once at least one resolver chain has entries."""
    client = getattr(request.app.state, "resolver_client", None)
    if client is None:
        return ReadyResponse(ready=False)

    multi_resolver = client.multi_resolver
    return ReadyResponse(
        ready=any(multi_resolver.chain_count(tld) for tld in multi_resolver.tlds)
    )
