"""Resolution layer routing names to pluggable back ends."""

from swarmresolver.resolution.base import Resolver
from swarmresolver.resolution.mock import MockResolver
from swarmresolver.resolution.multi import MultiResolver, MultiResolverConfig
from swarmresolver.resolution.static import StaticResolver

__all__ = [
    # Base
    "Resolver",
    # Multi
    "MultiResolver",
    "MultiResolverConfig",
    # Back ends
    "MockResolver",
    "StaticResolver",
]
