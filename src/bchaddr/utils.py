from __future__ import annotations

import hashlib

import construct as c

HASH_LENGTH = 20
"""Length of the RIPEMD-160 hash carried by every address format."""


def hash256(data: bytes) -> bytes:
    """Perform OP_HASH256.

    Hashes the data with SHA256 twice.
    """
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def to_bytes(value: bytes | bytearray | list[int]) -> bytes:
    """Normalize a byte sequence given as bytes, bytearray or a list of ints."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple)):
        return bytes(value)
    raise TypeError(f"{value!r} is not a byte sequence ({type(value).__name__})")


VersionedHash = c.Struct(
    "version" / c.Int8ub,
    "hash" / c.Bytes(HASH_LENGTH),
    c.Terminated,
)
"""Base58check payload of an address.

A single version byte followed by the 20-byte hash. Parsing fails with a
``construct.ConstructError`` if the payload is shorter or longer.
"""
