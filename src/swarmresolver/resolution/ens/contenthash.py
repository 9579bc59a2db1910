"""EIP-1577 content hash codec for swarm references.

A swarm content hash is laid out as unsigned varints followed by the digest::

    <swarm-ns 0xe4> <cid version 0x01> <swarm-manifest 0xfa>
    <keccak-256 0x1b> <digest length 0x20> <32 byte digest>

Only swarm content hashes are supported; other namespaces (ipfs, onion, ...)
are rejected as unsupported.
"""

from __future__ import annotations

from swarmresolver.core.address import Address
from swarmresolver.core.exceptions import InvalidContentHashError, NameNotRegisteredError

SWARM_NS = 0xE4
SWARM_MANIFEST = 0xFA
KECCAK_256 = 0x1B
CID_VERSION = 1

SWARM_PREFIX = "/swarm/"


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def _decode_varint(data: bytes, offset: int) -> tuple[int, int]:
    """Decode an unsigned varint, returning (value, next offset)."""
    value = 0
    shift = 0
    while True:
        if offset >= len(data):
            raise InvalidContentHashError("truncated content hash")
        byte = data[offset]
        offset += 1
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return value, offset
        shift += 7
        if shift > 63:
            raise InvalidContentHashError("varint overflow in content hash")


def encode_swarm(address: Address) -> bytes:
    """Build the content hash record for a swarm address."""
    return (
        _encode_varint(SWARM_NS)
        + _encode_varint(CID_VERSION)
        + _encode_varint(SWARM_MANIFEST)
        + _encode_varint(KECCAK_256)
        + _encode_varint(Address.SIZE)
        + address.data
    )


def decode(content_hash: bytes) -> str:
    """
    Decode a content hash record into its path form.

    Args:
        content_hash: Raw bytes of the ENS ``contenthash`` record

    Returns:
        ``/swarm/<hex digest>``

    Raises:
        NameNotRegisteredError: If the record is empty
        InvalidContentHashError: If the record is malformed or not swarm
    """
    if not content_hash:
        raise NameNotRegisteredError("content hash not set")

    codec, offset = _decode_varint(content_hash, 0)
    if codec != SWARM_NS:
        raise InvalidContentHashError(
            f"unsupported content hash codec: {codec:#x}",
            details={"codec": codec},
        )

    version, offset = _decode_varint(content_hash, offset)
    if version != CID_VERSION:
        raise InvalidContentHashError(f"unsupported CID version: {version}")

    content_codec, offset = _decode_varint(content_hash, offset)
    if content_codec != SWARM_MANIFEST:
        raise InvalidContentHashError(
            f"unsupported swarm content codec: {content_codec:#x}"
        )

    hash_fn, offset = _decode_varint(content_hash, offset)
    if hash_fn != KECCAK_256:
        raise InvalidContentHashError(f"unsupported multihash function: {hash_fn:#x}")

    length, offset = _decode_varint(content_hash, offset)
    digest = content_hash[offset:]
    if length != Address.SIZE or len(digest) != length:
        raise InvalidContentHashError(
            f"invalid digest length: expected {Address.SIZE}, got {len(digest)}"
        )

    return SWARM_PREFIX + digest.hex()
