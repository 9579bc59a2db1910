"""Swarm resolver - TLD routed name resolution to swarm content addresses."""

__version__ = "0.1.0"

from swarmresolver.client import ResolverClient, resolve
from swarmresolver.config import ResolverSettings
from swarmresolver.core.address import ZERO_ADDRESS, Address
from swarmresolver.resolution.base import Resolver
from swarmresolver.resolution.multi import MultiResolver, MultiResolverConfig

__all__ = [
    # Client
    "ResolverClient",
    "resolve",
    "ResolverSettings",
    # Types
    "Address",
    "ZERO_ADDRESS",
    # Resolution
    "MultiResolver",
    "MultiResolverConfig",
    "Resolver",
    # Version
    "__version__",
]
