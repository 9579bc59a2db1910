"""Application configuration using Pydantic Settings."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from swarmresolver.core.exceptions import ConfigurationError
from swarmresolver.core.names import DEFAULT_TLD
from swarmresolver.resolution.ens.client import checksum_contract_address


class ConnectionConfig(BaseModel):
    """A name service connection parsed from a resolver option."""

    model_config = ConfigDict(frozen=True)

    tld: str = Field(default="", description="TLD without the leading dot, empty for default")
    contract_address: str | None = Field(default=None, description="Registry contract address")
    endpoint: str = Field(..., min_length=1, description="Node RPC endpoint URL")

    @property
    def tld_key(self) -> str:
        """Key of the chain this connection is pushed to."""
        return "." + self.tld if self.tld else DEFAULT_TLD


def parse_connection_string(value: str) -> ConnectionConfig:
    """
    Parse a resolver option of the form ``[tld:][contract-addr@]url``.

    A URL scheme (``http://``) is never mistaken for a TLD, and a leading
    dot on the TLD is ignored.

    Examples:
        >>> parse_connection_string("eth:https://cloudflare-eth.com").tld
        'eth'
        >>> parse_connection_string("https://cloudflare-eth.com").tld_key
        ''

    Raises:
        ConfigurationError: If the contract address or endpoint is invalid
    """
    value = value.strip()
    tld = ""
    endpoint = value

    i = value.find(":")
    if i > 0 and value[i : i + 3] != "://":
        tld = value[:i].removeprefix(".")
        endpoint = value[i + 1 :]

    contract_address = None
    prefix, sep, rest = endpoint.partition("@")
    if sep and "://" not in prefix:
        try:
            contract_address = checksum_contract_address(prefix)
        except ValueError as e:
            raise ConfigurationError(
                f"invalid contract address in resolver option: {prefix!r}",
                {"option": value},
            ) from e
        endpoint = rest

    if not endpoint:
        raise ConfigurationError(
            f"missing endpoint in resolver option: {value!r}",
            {"option": value},
        )

    return ConnectionConfig(tld=tld, contract_address=contract_address, endpoint=endpoint)


class ResolverSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="SWARM_RESOLVER_",
    )

    # Name services
    resolver_options: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Name service connections as [tld:][contract-addr@]url, comma separated",
    )
    force_default: bool = Field(
        default=False,
        description="Route every name to the default resolver chain",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="RPC request timeout in seconds for name service clients",
    )

    # Server
    host: str = Field(
        default="127.0.0.1",
        description="API server bind address",
    )
    port: int = Field(
        default=8080,
        ge=0,
        le=65535,
        description="API server port",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("resolver_options", mode="before")
    @classmethod
    def split_resolver_options(cls, v: object) -> object:
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown logging level: {v}")
        return level

    def connection_configs(self) -> list[ConnectionConfig]:
        """Parse all resolver options in configuration order."""
        return [parse_connection_string(option) for option in self.resolver_options]


@lru_cache
def get_settings() -> ResolverSettings:
    """Get cached settings instance."""
    return ResolverSettings()
