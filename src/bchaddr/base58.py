from __future__ import annotations

from .exceptions import Base58Error
from .utils import hash256

B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
B58_BASE = len(B58_ALPHABET)
_B58_VALUES = {char: n for n, char in enumerate(B58_ALPHABET)}

CHECKSUM_LENGTH = 4


def b58encode(data: bytes) -> str:
    """Encode a byte string to base58."""
    value = int.from_bytes(data, "big")

    chars = []
    while value:
        value, mod = divmod(value, B58_BASE)
        chars.append(B58_ALPHABET[mod])

    # leading zero bytes are written as leading '1's
    n_pad = len(data) - len(data.lstrip(b"\x00"))
    return B58_ALPHABET[0] * n_pad + "".join(reversed(chars))


def b58decode(text: str) -> bytes:
    """Decode a base58 string to bytes."""
    if not isinstance(text, str):
        raise TypeError("a string is required")
    if not text:
        raise Base58Error("base58 string cannot be empty")

    value = 0
    for char in text:
        digit = _B58_VALUES.get(char)
        if digit is None:
            raise Base58Error(f"invalid base58 character {char!r}")
        value = value * B58_BASE + digit

    body = value.to_bytes((value.bit_length() + 7) // 8, "big")
    n_pad = len(text) - len(text.lstrip(B58_ALPHABET[0]))
    return b"\x00" * n_pad + body


def b58check_encode(payload: bytes) -> str:
    checksum = hash256(payload)[:CHECKSUM_LENGTH]
    return b58encode(payload + checksum)


def b58check_decode(text: str) -> bytes:
    """Decode a base58check string and verify its checksum.

    Returns the payload without the checksum.
    """
    raw = b58decode(text)
    if len(raw) < CHECKSUM_LENGTH:
        raise Base58Error("base58check string too short")
    payload, checksum = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
    if hash256(payload)[:CHECKSUM_LENGTH] != checksum:
        raise Base58Error("invalid base58 checksum")
    return payload
