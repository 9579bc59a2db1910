"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from swarmresolver.api.schemas.base import APIBaseSchema


class ResolveResponse(APIBaseSchema):
    """Response for a resolved name."""

    name: str
    tld: str = Field(description="Chain the name was routed to, empty for default")
    address: str = Field(description="Hex encoded swarm address")


class ChainStatus(APIBaseSchema):
    """Number of resolvers configured for a TLD."""

    tld: str
    resolvers: int


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    chains: list[ChainStatus] = Field(default_factory=list)


class ReadyResponse(APIBaseSchema):
    """Readiness check response."""

    ready: bool
