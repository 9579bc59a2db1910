"""Unit test fixtures with fake name service back ends."""

from __future__ import annotations

from typing import Any

import pytest

from swarmresolver.config import ConnectionConfig
from swarmresolver.core.address import Address
from swarmresolver.core.exceptions import ResolveFailedError
from swarmresolver.resolution.ens.client import ClientConfig, ENSClient
from swarmresolver.resolution.mock import MockResolver


# ============================================================================
# Mock Resolver Fixtures
# ============================================================================


@pytest.fixture
def ok_resolver(address: Address) -> MockResolver:
    """Resolver that always returns the sample address."""
    return MockResolver.returning(address)


@pytest.fixture
def err_resolver() -> MockResolver:
    """Resolver that always fails with a message derived from the name."""
    return MockResolver.failing(
        lambda name: ResolveFailedError(f"name resolution failed for {name!r}")
    )


# ============================================================================
# Fake ENS Back End Fixtures
# ============================================================================


class FakeBackend:
    """Stands in for a web3 connection, serving content hashes from a dict."""

    def __init__(self, endpoint: str, records: dict[str, str]) -> None:
        self.endpoint = endpoint
        self.records = dict(records)
        self.closed = False

    def close(self) -> None:
        self.closed = True


def fake_resolve(backend: FakeBackend, name: str) -> str:
    try:
        return backend.records[name]
    except KeyError:
        raise LookupError(f"no record for {name}") from None


class FakeClientFactory:
    """Builds ENS clients wired to fake back ends.

    Endpoints containing ``unreachable`` fail to dial.
    """

    def __init__(self, records: dict[str, str]) -> None:
        self.records = records
        self.clients: list[ENSClient] = []
        self.backends: list[FakeBackend] = []

    def _dial(self, endpoint: str) -> Any:
        if "unreachable" in endpoint:
            raise OSError("connection refused")
        backend = FakeBackend(endpoint, self.records)
        self.backends.append(backend)
        return backend

    def __call__(self, conn: ConnectionConfig) -> ENSClient:
        client = ENSClient(
            ClientConfig(contract_address=conn.contract_address),
            dial_fn=self._dial,
            resolve_fn=fake_resolve,
        )
        self.clients.append(client)
        return client


@pytest.fixture
def ens_records(address_hex: str, alt_address: Address) -> dict[str, str]:
    """Content hash records served by fake back ends."""
    return {
        "swarm.eth": f"/swarm/{address_hex}",
        "hello": f"/swarm/{alt_address.hex()}",
        "ipfs.eth": "/ipfs/QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG",
    }


@pytest.fixture
def client_factory(ens_records: dict[str, str]) -> FakeClientFactory:
    """Factory producing ENS clients backed by ``ens_records``."""
    return FakeClientFactory(ens_records)
