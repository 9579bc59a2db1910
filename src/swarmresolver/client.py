"""Main library client for standalone usage."""

from __future__ import annotations

import logging
from collections.abc import Callable

from swarmresolver.config import ConnectionConfig, ResolverSettings
from swarmresolver.core.address import Address
from swarmresolver.core.exceptions import ResolverConnectionError
from swarmresolver.resolution.ens.client import ClientConfig, ENSClient
from swarmresolver.resolution.multi import MultiResolver, MultiResolverConfig

logger = logging.getLogger(__name__)

ClientFactory = Callable[[ConnectionConfig], ENSClient]


class ResolverClient:
    """
    Main client for the swarmresolver library.

    Builds a MultiResolver from settings, connecting one name service client
    per resolver option and pushing it to the chain for the option's TLD.
    The client owns those connections and closes them on exit.

    Usage:
        with ResolverClient() as client:
            address = client.resolve("swarm.eth")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: ResolverSettings | None = None,
        *,
        client_factory: ClientFactory | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            client_factory: Builds a name service client for a connection.
                Defaults to an ENSClient using the configured timeout.
        """
        self._settings = settings or ResolverSettings()
        self._client_factory = client_factory or self._default_client_factory
        self._multi_resolver: MultiResolver | None = None
        self._clients: list[ENSClient] = []

    def __enter__(self) -> ResolverClient:
        """Initialize resources on context entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        self.close()

    def _default_client_factory(self, conn: ConnectionConfig) -> ENSClient:
        return ENSClient(
            ClientConfig(
                contract_address=conn.contract_address,
                timeout=self._settings.request_timeout,
            )
        )

    def open(self) -> None:
        """Connect name service clients and build the resolver chains."""
        if self._multi_resolver is not None:
            return

        connections = self._settings.connection_configs()
        multi_resolver = MultiResolver(
            MultiResolverConfig(force_default=self._settings.force_default)
        )

        for conn in connections:
            client = self._client_factory(conn)
            try:
                client.connect(conn.endpoint)
            except ResolverConnectionError as e:
                logger.error(f"Failed to connect name resolver for {conn.tld_key!r}: {e}")
                continue

            multi_resolver.push_resolver(conn.tld_key, client)
            self._clients.append(client)
            logger.info(f"Connected name resolver for {conn.tld_key!r} to {conn.endpoint}")

        self._multi_resolver = multi_resolver

    def close(self) -> None:
        """Close all name service clients created by this client."""
        for client in self._clients:
            try:
                client.close()
            except Exception as e:
                logger.warning(f"Failed to close {client!r}: {e}")
        self._clients = []
        self._multi_resolver = None

    @property
    def multi_resolver(self) -> MultiResolver:
        """The configured MultiResolver."""
        if self._multi_resolver is None:
            raise RuntimeError(
                "Client not initialized. Use 'with ResolverClient() as client:'"
            )
        return self._multi_resolver

    def resolve(self, name: str) -> Address:
        """
        Resolve a name to a swarm address.

        Args:
            name: Name to resolve, routed by its TLD

        Returns:
            The resolved address
        """
        return self.multi_resolver.resolve(name)


# Convenience function for one-off resolutions
def resolve(
    name: str,
    *,
    settings: ResolverSettings | None = None,
) -> Address:
    """
    Resolve a name (convenience function).

    For multiple resolutions, use ResolverClient to reuse connections.
    """
    with ResolverClient(settings) as client:
        return client.resolve(name)
