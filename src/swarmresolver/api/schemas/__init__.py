"""API schema definitions."""

from swarmresolver.api.schemas.base import APIBaseSchema
from swarmresolver.api.schemas.responses import (
    ChainStatus,
    HealthResponse,
    ReadyResponse,
    ResolveResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Responses
    "ChainStatus",
    "HealthResponse",
    "ReadyResponse",
    "ResolveResponse",
]
