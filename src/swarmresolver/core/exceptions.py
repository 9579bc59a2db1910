"""Custom exception hierarchy for swarmresolver."""

from typing import Any


class SwarmResolverError(Exception):
    """Base exception for all swarmresolver errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(SwarmResolverError):
    """Input validation failed."""

    pass


class InvalidTLDError(ValidationError):
    """A TLD key is neither empty nor a dot followed by a suffix."""

    def __init__(self, tld: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"invalid TLD: {tld!r}", details)
        self.tld = tld


class InvalidAddressError(ValidationError):
    """A value could not be parsed as a swarm address."""

    pass


class ConfigurationError(ValidationError):
    """Resolver configuration is malformed."""

    pass


class ResolverChainEmptyError(SwarmResolverError):
    """No resolver is configured for a TLD key."""

    def __init__(self, tld: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("resolver chain empty", details)
        self.tld = tld


class ResolutionError(SwarmResolverError):
    """A name resolution back end failed to resolve a name."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source


class ResolveFailedError(ResolutionError):
    """The back end lookup itself failed."""

    pass


class InvalidContentHashError(ResolutionError):
    """The content hash record is not a valid swarm reference."""

    pass


class NameNotRegisteredError(ResolutionError):
    """The name has no content hash record."""

    pass


class ResolverConnectionError(SwarmResolverError):
    """Connecting to a name resolution service failed."""

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.endpoint = endpoint
