"""Swarm address value object."""

from __future__ import annotations

import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swarmresolver.core.exceptions import InvalidAddressError


class Address(BaseModel):
    """Content address of a swarm chunk or manifest.

    Addresses are immutable, compared by value and always ``SIZE`` bytes long.
    """

    model_config = ConfigDict(frozen=True)

    SIZE: ClassVar[int] = 32
    HEX_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[0-9a-fA-F]{64}$")

    data: bytes = Field(..., description="Raw address bytes")

    @field_validator("data")
    @classmethod
    def validate_size(cls, v: bytes) -> bytes:
        if len(v) != cls.SIZE:
            raise ValueError(f"Address must be {cls.SIZE} bytes, got {len(v)}")
        return v

    @classmethod
    def from_bytes(cls, data: bytes) -> Address:
        """Build an address from raw bytes."""
        if len(data) != cls.SIZE:
            raise InvalidAddressError(
                f"Address must be {cls.SIZE} bytes, got {len(data)}",
                {"length": len(data)},
            )
        return cls(data=bytes(data))

    @classmethod
    def parse_hex(cls, value: str) -> Address:
        """Parse the hex form of an address, with or without a 0x prefix."""
        normalized = value.strip()
        if normalized[:2].lower() == "0x":
            normalized = normalized[2:]
        if not cls.HEX_PATTERN.match(normalized):
            raise InvalidAddressError(
                f"Invalid swarm address: {value!r}",
                {"value": value},
            )
        return cls(data=bytes.fromhex(normalized))

    @property
    def is_zero(self) -> bool:
        return not any(self.data)

    def hex(self) -> str:
        return self.data.hex()

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"Address({self.hex()})"


ZERO_ADDRESS = Address(data=bytes(Address.SIZE))
