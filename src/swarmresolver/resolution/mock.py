"""Configurable resolver test double."""

from __future__ import annotations

from collections.abc import Callable

from swarmresolver.core.address import Address
from swarmresolver.core.exceptions import ResolveFailedError

ResolveFunc = Callable[[str], Address]


class MockResolver:
    """
    Resolver whose behaviour is supplied by a function.

    Every call is recorded in ``calls`` so tests can assert which resolvers
    in a chain were consulted.

    Usage:
        ok = MockResolver.returning(address)
        bad = MockResolver.failing(ResolveFailedError("boom"))
    """

    def __init__(self, resolve_func: ResolveFunc | None = None) -> None:
        self.resolve_func = resolve_func
        self.calls: list[str] = []

    @classmethod
    def returning(cls, address: Address) -> MockResolver:
        """Mock that always resolves to ``address``."""
        return cls(lambda _name: address)

    @classmethod
    def failing(cls, error: Exception | Callable[[str], Exception]) -> MockResolver:
        """Mock that always raises, optionally building the error from the name."""

        def _fail(name: str) -> Address:
            raise error(name) if callable(error) else error

        return cls(_fail)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def resolve(self, name: str) -> Address:
        self.calls.append(name)
        if self.resolve_func is None:
            raise ResolveFailedError("resolve function not implemented", source="mock")
        return self.resolve_func(name)
