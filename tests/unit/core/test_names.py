"""Tests for TLD key helpers."""

from __future__ import annotations

import pytest

from swarmresolver.core.names import DEFAULT_TLD, get_tld, is_valid_tld


class TestIsValidTLD:
    """Tests for TLD key validation."""

    @pytest.mark.parametrize("tld", ["", ".eth", ".tld", ".a", ".ETH", ".co.uk"])
    def test_valid(self, tld: str):
        assert is_valid_tld(tld)

    @pytest.mark.parametrize("tld", ["invalid", "bad", "eth", ".", "e.th", " .eth"])
    def test_invalid(self, tld: str):
        assert not is_valid_tld(tld)


class TestGetTLD:
    """Tests for routing key extraction."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("example.tld", ".tld"),
            ("get.good", ".good"),
            ("sub.domain.eth", ".eth"),
            (".tld", ".tld"),
            ("Swarm.ETH", ".ETH"),
        ],
    )
    def test_suffix(self, name: str, expected: str):
        """The final .suffix is used verbatim."""
        assert get_tld(name) == expected

    @pytest.mark.parametrize("name", ["", "hello", "trailing."])
    def test_no_suffix_uses_default(self, name: str):
        """Names without a recognizable suffix route to the default key."""
        assert get_tld(name) == DEFAULT_TLD
