"""TLD routed multi resolver."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from swarmresolver.core.address import Address
from swarmresolver.core.exceptions import InvalidTLDError, ResolverChainEmptyError
from swarmresolver.core.names import DEFAULT_TLD, get_tld, is_valid_tld
from swarmresolver.resolution.base import Resolver

logger = logging.getLogger(__name__)


class MultiResolverConfig(BaseModel):
    """Configuration for a MultiResolver."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    force_default: bool = Field(
        default=False,
        description="Route every name to the default chain regardless of its TLD",
    )


class MultiResolver:
    """
    Routes name resolution to chains of resolvers keyed by TLD.

    Each TLD key (``""`` for the default chain, otherwise ``".suffix"``)
    holds an ordered chain of resolvers. Resolving a name walks the chain
    for the name's TLD in insertion order and returns the first address any
    resolver produces.

    The resolvers in a chain are referenced, not owned: opening and closing
    their connections is up to whoever created them.

    The routing table is not synchronized. Callers that mutate chains while
    resolving from other threads must serialize access themselves.
    """

    def __init__(self, config: MultiResolverConfig | None = None) -> None:
        self.config = config or MultiResolverConfig()
        self._chains: dict[str, list[Resolver]] = {}

    @property
    def force_default(self) -> bool:
        """Whether every name is routed to the default chain."""
        return self.config.force_default

    @property
    def tlds(self) -> list[str]:
        """Registered TLD keys, including chains that are currently empty."""
        return list(self._chains)

    def push_resolver(self, tld: str, resolver: Resolver) -> None:
        """
        Append a resolver to the tail of the chain for a TLD.

        Raises:
            InvalidTLDError: If the TLD key is malformed
        """
        if not is_valid_tld(tld):
            raise InvalidTLDError(tld)

        self._chains.setdefault(tld, []).append(resolver)
        logger.debug(f"Pushed resolver {resolver!r} to chain {tld!r}")

    def pop_resolver(self, tld: str) -> None:
        """
        Remove the most recently pushed resolver from the chain for a TLD.

        Raises:
            InvalidTLDError: If the TLD key is malformed
            ResolverChainEmptyError: If the chain has no resolvers
        """
        if not is_valid_tld(tld):
            raise InvalidTLDError(tld)

        chain = self._chains.get(tld)
        if not chain:
            raise ResolverChainEmptyError(tld)

        resolver = chain.pop()
        logger.debug(f"Popped resolver {resolver!r} from chain {tld!r}")

    def chain_count(self, tld: str) -> int:
        """Number of resolvers in the chain for a TLD, 0 if there is none."""
        return len(self._chains.get(tld, ()))

    def get_chain(self, tld: str) -> list[Resolver]:
        """Copy of the chain for a TLD in insertion order."""
        return list(self._chains.get(tld, ()))

    def resolve(self, name: str) -> Address:
        """
        Resolve a name using the chain for its TLD.

        Resolvers are tried in the order they were pushed and the first
        address returned wins; later resolvers are not called. If every
        resolver fails, the exception raised by the last one is re-raised
        unchanged.

        Args:
            name: The name to resolve

        Returns:
            The resolved address

        Raises:
            ResolverChainEmptyError: If no resolver is configured for the TLD
            Exception: Whatever the last resolver in the chain raised
        """
        tld = DEFAULT_TLD if self.force_default else get_tld(name)

        chain = self._chains.get(tld)
        if not chain:
            raise ResolverChainEmptyError(tld)

        *head, last = chain
        for resolver in head:
            try:
                return resolver.resolve(name)
            except Exception as e:
                logger.debug(f"Resolver {resolver!r} failed for {name!r}: {e}")

        return last.resolve(name)
