"""Core types, exceptions, and name helpers."""

from .address import ZERO_ADDRESS, Address
from .exceptions import (
    ConfigurationError,
    InvalidAddressError,
    InvalidContentHashError,
    InvalidTLDError,
    NameNotRegisteredError,
    ResolutionError,
    ResolveFailedError,
    ResolverChainEmptyError,
    ResolverConnectionError,
    SwarmResolverError,
    ValidationError,
)
from .names import DEFAULT_TLD, get_tld, is_valid_tld

__all__ = [
    # Address
    "Address",
    "ZERO_ADDRESS",
    # Names
    "DEFAULT_TLD",
    "get_tld",
    "is_valid_tld",
    # Exceptions
    "ConfigurationError",
    "InvalidAddressError",
    "InvalidContentHashError",
    "InvalidTLDError",
    "NameNotRegisteredError",
    "ResolutionError",
    "ResolveFailedError",
    "ResolverChainEmptyError",
    "ResolverConnectionError",
    "SwarmResolverError",
    "ValidationError",
]
