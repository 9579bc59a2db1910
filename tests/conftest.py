"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from swarmresolver.config import ResolverSettings
from swarmresolver.core.address import Address


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def address() -> Address:
    """A sample swarm address."""
    return Address(data=b"aaaabbbbccccdddd" * 2)


@pytest.fixture
def alt_address() -> Address:
    """A second sample swarm address, distinct from ``address``."""
    return Address(data=b"ddddccccbbbbaaaa" * 2)


@pytest.fixture
def address_hex(address: Address) -> str:
    """Hex form of the sample address."""
    return address.hex()


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def settings() -> ResolverSettings:
    """Settings with one default and one .eth name service connection."""
    return ResolverSettings(
        _env_file=None,
        resolver_options=[
            "https://default.example",
            "eth:0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e@https://eth.example",
        ],
        request_timeout=5.0,
    )
