"""Tests for the mock resolver test double."""

from __future__ import annotations

import pytest

from swarmresolver.core.address import Address
from swarmresolver.core.exceptions import ResolveFailedError
from swarmresolver.resolution.base import Resolver
from swarmresolver.resolution.mock import MockResolver


class TestMockResolver:
    """Tests for MockResolver."""

    def test_implements_resolver(self):
        assert isinstance(MockResolver(), Resolver)

    def test_default_not_implemented(self):
        """Without a resolve function the mock fails."""
        with pytest.raises(ResolveFailedError, match="not implemented"):
            MockResolver().resolve("name")

    def test_returning(self, address: Address):
        assert MockResolver.returning(address).resolve("anything") == address

    def test_failing_with_instance(self):
        error = ResolveFailedError("boom")
        with pytest.raises(ResolveFailedError) as exc_info:
            MockResolver.failing(error).resolve("name")
        assert exc_info.value is error

    def test_failing_with_factory(self, err_resolver: MockResolver):
        """The error can be built from the name."""
        with pytest.raises(ResolveFailedError, match="'some.name'"):
            err_resolver.resolve("some.name")

    def test_records_calls(self, ok_resolver: MockResolver):
        ok_resolver.resolve("a")
        ok_resolver.resolve("b")
        assert ok_resolver.calls == ["a", "b"]
        assert ok_resolver.call_count == 2
