"""Tests for settings and resolver option parsing."""

from __future__ import annotations

import pydantic
import pytest

from swarmresolver.config import ResolverSettings, parse_connection_string
from swarmresolver.core.exceptions import ConfigurationError

CONTRACT = "0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e"
BAD_CHECKSUM = "0x00000000000c2E074eC69A0dFb2997BA6C7d2e1e"


class TestParseConnectionString:
    """Tests for [tld:][contract-addr@]url parsing."""

    @pytest.mark.parametrize(
        ("value", "tld", "contract", "endpoint"),
        [
            ("https://cloudflare-eth.com", "", None, "https://cloudflare-eth.com"),
            ("eth:https://cloudflare-eth.com", "eth", None, "https://cloudflare-eth.com"),
            (".eth:https://cloudflare-eth.com", "eth", None, "https://cloudflare-eth.com"),
            (f"{CONTRACT}@https://eth.example", "", CONTRACT, "https://eth.example"),
            (f"rsk:{CONTRACT}@http://localhost:4444", "rsk", CONTRACT, "http://localhost:4444"),
            ("eth:/tmp/geth.ipc", "eth", None, "/tmp/geth.ipc"),
            ("https://user@node.example", "", None, "https://user@node.example"),
        ],
    )
    def test_parse(self, value: str, tld: str, contract: str | None, endpoint: str):
        conn = parse_connection_string(value)
        assert conn.tld == tld
        assert conn.contract_address == contract
        assert conn.endpoint == endpoint

    def test_tld_key(self):
        assert parse_connection_string("eth:https://a.example").tld_key == ".eth"
        assert parse_connection_string("https://a.example").tld_key == ""

    def test_invalid_contract_address(self):
        with pytest.raises(ConfigurationError, match="contract address"):
            parse_connection_string("eth:0x1234@https://a.example")

    def test_contract_address_checksummed(self):
        """Lowercase contract addresses are normalized to checksum form."""
        conn = parse_connection_string(f"eth:{CONTRACT.lower()}@https://a.example")
        assert conn.contract_address == CONTRACT

    def test_contract_address_bad_checksum(self):
        with pytest.raises(ConfigurationError, match="contract address"):
            parse_connection_string(f"eth:{BAD_CHECKSUM}@https://a.example")

    @pytest.mark.parametrize("value", ["eth:", f"eth:{CONTRACT}@"])
    def test_missing_endpoint(self, value: str):
        with pytest.raises(ConfigurationError, match="missing endpoint"):
            parse_connection_string(value)


class TestResolverSettings:
    """Tests for ResolverSettings."""

    def test_defaults(self):
        settings = ResolverSettings(_env_file=None)
        assert settings.resolver_options == []
        assert settings.force_default is False
        assert settings.request_timeout == 30.0
        assert settings.log_level == "INFO"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Resolver options are read comma separated from the environment."""
        monkeypatch.setenv(
            "SWARM_RESOLVER_RESOLVER_OPTIONS",
            "eth:https://eth.example, https://default.example",
        )
        monkeypatch.setenv("SWARM_RESOLVER_FORCE_DEFAULT", "true")
        monkeypatch.setenv("SWARM_RESOLVER_LOG_LEVEL", "debug")

        settings = ResolverSettings(_env_file=None)

        assert settings.resolver_options == [
            "eth:https://eth.example",
            "https://default.example",
        ]
        assert settings.force_default is True
        assert settings.log_level == "DEBUG"

    def test_connection_configs_keep_order(self, settings: ResolverSettings):
        configs = settings.connection_configs()
        assert [c.tld_key for c in configs] == ["", ".eth"]
        assert configs[1].contract_address == CONTRACT

    def test_timeout_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            ResolverSettings(_env_file=None, request_timeout=-1)

    def test_unknown_log_level(self):
        with pytest.raises(pydantic.ValidationError):
            ResolverSettings(_env_file=None, log_level="verbose")
