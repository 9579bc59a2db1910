"""In-memory resolver backed by a fixed name to address map."""

from __future__ import annotations

from collections.abc import Mapping

from swarmresolver.core.address import Address
from swarmresolver.core.exceptions import NameNotRegisteredError


class StaticResolver:
    """Resolve names from a static map, e.g. loaded from configuration."""

    SOURCE_NAME = "static"

    def __init__(self, records: Mapping[str, Address | str] | None = None) -> None:
        self._records: dict[str, Address] = {}
        for name, address in (records or {}).items():
            self.set(name, address)

    def set(self, name: str, address: Address | str) -> None:
        """Add or replace the record for a name."""
        if isinstance(address, str):
            address = Address.parse_hex(address)
        self._records[name] = address

    def remove(self, name: str) -> None:
        self._records.pop(name, None)

    def resolve(self, name: str) -> Address:
        try:
            return self._records[name]
        except KeyError:
            raise NameNotRegisteredError(
                f"name not registered: {name!r}",
                source=self.SOURCE_NAME,
            ) from None

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"StaticResolver({len(self._records)} records)"
