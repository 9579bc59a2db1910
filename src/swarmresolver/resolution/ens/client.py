"""ENS compatible name service client."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from functools import partial
from typing import Any, ClassVar

from ens import ENS
from ens.constants import ENS_MAINNET_ADDR
from pydantic import BaseModel, ConfigDict, Field, field_validator
from web3 import Web3

from swarmresolver.core.address import Address
from swarmresolver.core.exceptions import (
    InvalidAddressError,
    InvalidContentHashError,
    NameNotRegisteredError,
    ResolutionError,
    ResolveFailedError,
    ResolverConnectionError,
)
from swarmresolver.resolution.ens import contenthash

logger = logging.getLogger(__name__)

DialFunc = Callable[[str], Any]
ResolveFunc = Callable[[Any, str], str]

CONTRACT_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def checksum_contract_address(value: str) -> str:
    """
    Validate a contract address and return its EIP-55 checksum form.

    All lowercase and all uppercase addresses are accepted. Mixed case
    addresses must carry a valid checksum.

    Raises:
        ValueError: If the value is not a valid contract address
    """
    if not CONTRACT_ADDRESS_PATTERN.match(value) or not Web3.is_address(value):
        raise ValueError(f"Invalid contract address: {value}")
    return Web3.to_checksum_address(value)


class ClientConfig(BaseModel):
    """Configuration for an ENS client."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    contract_address: str | None = Field(
        default=None,
        description="ENS registry contract address (network default if unset)",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="RPC request timeout in seconds",
    )

    @field_validator("contract_address")
    @classmethod
    def validate_contract_address(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return checksum_contract_address(v)


def dial_web3(
    endpoint: str,
    timeout: float = 30.0,
    contract_address: str | None = None,
) -> Any:
    """
    Open a JSON-RPC connection to an Ethereum compatible node.

    The node must be reachable and the ENS registry contract must be
    deployed on its network.
    """
    w3 = Web3(Web3.HTTPProvider(endpoint, request_kwargs={"timeout": timeout}))
    if not w3.is_connected():
        raise ResolverConnectionError(
            f"failed to connect to {endpoint}",
            endpoint=endpoint,
        )

    registry = contract_address or ENS_MAINNET_ADDR
    if not w3.eth.get_code(registry):
        raise ResolverConnectionError(
            f"no ENS registry at {registry} on {endpoint}",
            endpoint=endpoint,
        )
    return w3


def resolve_contenthash(
    backend: Any,
    name: str,
    contract_address: str | None = None,
) -> str:
    """Read and decode the ENS content hash record of a name."""
    ns = ENS.from_web3(backend, addr=contract_address)
    resolver = ns.resolver(name)
    if resolver is None:
        raise NameNotRegisteredError(f"no resolver set for {name!r}", source="ens")

    raw = resolver.caller.contenthash(ns.namehash(name))
    return contenthash.decode(raw)


class ENSClient:
    """
    Name resolution client for ENS and ENS compatible registries (e.g. RNS).

    The dial and resolve steps are pluggable so the client can be exercised
    without a node. By default it dials with web3 and reads the EIP-1577
    ``contenthash`` record of the name.

    Usage:
        client = ENSClient(ClientConfig(timeout=10))
        client.connect("https://cloudflare-eth.com")
        try:
            address = client.resolve("swarm.eth")
        finally:
            client.close()
    """

    SOURCE_NAME: ClassVar[str] = "ens"

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        dial_fn: DialFunc | None = None,
        resolve_fn: ResolveFunc | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.endpoint: str | None = None
        self._backend: Any = None
        self._dial_fn: DialFunc = dial_fn or partial(
            dial_web3,
            timeout=self.config.timeout,
            contract_address=self.config.contract_address,
        )
        self._resolve_fn: ResolveFunc = resolve_fn or partial(
            resolve_contenthash, contract_address=self.config.contract_address
        )

    @property
    def is_connected(self) -> bool:
        return self._backend is not None

    def connect(self, endpoint: str) -> None:
        """
        Connect to a name service node.

        Raises:
            ResolverConnectionError: If the node cannot be reached or has no
                ENS registry
        """
        try:
            backend = self._dial_fn(endpoint)
        except ResolverConnectionError:
            raise
        except Exception as e:
            raise ResolverConnectionError(
                f"failed to connect to {endpoint}: {e}",
                endpoint=endpoint,
            ) from e

        self.endpoint = endpoint
        self._backend = backend
        logger.debug(f"Connected ENS client to {endpoint}")

    def resolve(self, name: str) -> Address:
        """
        Resolve a name to the swarm address in its content hash record.

        Raises:
            ResolverConnectionError: If the client is not connected
            ResolveFailedError: If the lookup itself fails
            InvalidContentHashError: If the record is not a swarm reference
            NameNotRegisteredError: If the name has no content hash
        """
        if not self.is_connected:
            raise ResolverConnectionError("client not connected", endpoint=self.endpoint)

        try:
            content = self._resolve_fn(self._backend, name)
        except ResolutionError:
            raise
        except Exception as e:
            raise ResolveFailedError(
                f"resolve failed for {name!r}: {e}",
                source=self.SOURCE_NAME,
            ) from e

        if not content.startswith(contenthash.SWARM_PREFIX):
            raise InvalidContentHashError("ENS contenthash invalid", source=self.SOURCE_NAME)

        try:
            address = Address.parse_hex(content.removeprefix(contenthash.SWARM_PREFIX))
        except InvalidAddressError as e:
            raise InvalidContentHashError(
                f"ENS contenthash invalid: {e}",
                source=self.SOURCE_NAME,
            ) from e

        if address.is_zero:
            raise NameNotRegisteredError(f"name not registered: {name!r}", source=self.SOURCE_NAME)

        return address

    def close(self) -> None:
        """Close the connection to the node. Safe to call more than once."""
        backend, self._backend = self._backend, None
        if backend is None:
            return

        close = getattr(backend, "close", None)
        if callable(close):
            close()
        logger.debug(f"Closed ENS client for {self.endpoint}")

    def __enter__(self) -> ENSClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ENSClient(endpoint={self.endpoint!r})"

