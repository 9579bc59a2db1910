"""Resolver capability shared by all name resolution back ends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from swarmresolver.core.address import Address


@runtime_checkable
class Resolver(Protocol):
    """
    A name resolution back end.

    Implementations either return the address a name points to, or raise an
    exception describing why this back end could not resolve it. Calls are
    independent of each other and may be repeated.
    """

    def resolve(self, name: str) -> Address:
        """
        Resolve a name to a swarm address.

        Args:
            name: The name to resolve, in any syntax the back end accepts

        Returns:
            The resolved address

        Raises:
            Exception: If the name cannot be resolved by this back end
        """
        ...
