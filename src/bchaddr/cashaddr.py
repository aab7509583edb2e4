"""Cashaddr codec.

Encodes a ``(prefix, type, hash)`` triple as ``prefix:payload`` where the
payload is the base32 rendering of a version byte, the hash and a 40-bit
BCH checksum computed over the prefix and the data.
"""

from __future__ import annotations

import typing as t
from enum import IntEnum

from .exceptions import CashaddrError

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
SEPARATOR = ":"
CHECKSUM_LENGTH = 8

GENERATORS = (0x98F2BC8E61, 0x79B76D99E2, 0xF33E5FB3C4, 0xAE2EABE2A8, 0x1E4F43E470)

# hash length in bytes -> size bits of the version byte
HASH_SIZES = {20: 0, 24: 1, 28: 2, 32: 3, 40: 4, 48: 5, 56: 6, 64: 7}
_SIZE_BITS = {bits: size for size, bits in HASH_SIZES.items()}


class CashaddrType(IntEnum):
    """Type bits of the cashaddr version byte."""

    P2PKH = 0
    P2SH = 1


def polymod(values: t.Iterable[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 35
        chk = ((chk & 0x07_FFFF_FFFF) << 5) ^ value
        for i, generator in enumerate(GENERATORS):
            if (top >> i) & 1:
                chk ^= generator
    return chk ^ 1


def prefix_expand(prefix: str) -> list[int]:
    """Lower 5 bits of each prefix character, followed by the separator zero."""
    return [ord(x) & 0x1F for x in prefix] + [0]


def create_checksum(prefix: str, data: list[int]) -> list[int]:
    poly = polymod(prefix_expand(prefix) + data + [0] * CHECKSUM_LENGTH)
    return [(poly >> 5 * (CHECKSUM_LENGTH - 1 - i)) & 0x1F for i in range(CHECKSUM_LENGTH)]


def verify_checksum(prefix: str, data: list[int]) -> bool:
    return polymod(prefix_expand(prefix) + data) == 0


def convertbits(data: t.Iterable[int], frombits: int, tobits: int, pad: bool = True) -> list[int]:
    """General power-of-2 base conversion."""
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            raise CashaddrError("Value out of range")
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits:
        raise CashaddrError("Excess padding")
    elif (acc << (tobits - bits)) & maxv:
        raise CashaddrError("Non-zero padding")
    return ret


def _check_prefix(prefix: str) -> None:
    if not prefix:
        raise CashaddrError("Empty prefix")
    if SEPARATOR in prefix:
        raise CashaddrError("Prefix must not contain a separator")
    if any(ord(x) < 33 or ord(x) > 126 for x in prefix):
        raise CashaddrError("Prefix character out of range")
    if prefix.lower() != prefix and prefix.upper() != prefix:
        raise CashaddrError("Mixed case prefix")


def encode(prefix: str, kind: int, payload: bytes) -> str:
    """Encode a hash of the given type as a cashaddr string with prefix."""
    if not isinstance(prefix, str):
        raise TypeError("prefix must be a string")
    if not isinstance(payload, (bytes, bytearray)):
        raise TypeError("payload must be bytes")
    _check_prefix(prefix)
    try:
        kind = CashaddrType(kind)
    except ValueError as e:
        raise CashaddrError(f"Unknown cashaddr type {kind}") from e
    size_bits = HASH_SIZES.get(len(payload))
    if size_bits is None:
        raise CashaddrError(f"Invalid hash length {len(payload)}")

    prefix = prefix.lower()
    version = (kind << 3) | size_bits
    data = convertbits([version] + list(payload), 8, 5)
    checksum = create_checksum(prefix, data)
    return prefix + SEPARATOR + "".join(CHARSET[d] for d in data + checksum)


def decode(address: str) -> tuple[str, CashaddrType, bytes]:
    """Decode a prefixed cashaddr string.

    Returns the lowercased prefix, the type and the hash.
    """
    if not isinstance(address, str):
        raise TypeError("address must be a string")
    if not address.isascii():
        raise CashaddrError("Non-ASCII character in address")
    if address.lower() != address and address.upper() != address:
        raise CashaddrError("Mixed case address")

    address = address.lower()
    if address.count(SEPARATOR) != 1:
        raise CashaddrError("Address must contain exactly one separator")
    prefix, body = address.split(SEPARATOR)
    _check_prefix(prefix)
    if len(body) <= CHECKSUM_LENGTH:
        raise CashaddrError("Address too short")

    data = []
    for char in body:
        value = CHARSET.find(char)
        if value == -1:
            raise CashaddrError(f"Invalid character {char!r}")
        data.append(value)

    if not verify_checksum(prefix, data):
        raise CashaddrError("invalid checksum")

    decoded = convertbits(data[:-CHECKSUM_LENGTH], 5, 8, pad=False)
    if not decoded:
        raise CashaddrError("Empty payload")
    version, payload = decoded[0], bytes(decoded[1:])
    if version & 0x80:
        raise CashaddrError("Reserved version bit set")
    try:
        kind = CashaddrType((version >> 3) & 0x0F)
    except ValueError as e:
        raise CashaddrError(f"Unknown cashaddr type {(version >> 3) & 0x0F}") from e
    if _SIZE_BITS[version & 0x07] != len(payload):
        raise CashaddrError("Hash length does not match version byte")
    return prefix, kind, payload
