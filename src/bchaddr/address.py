"""Address resolution and rendering.

`resolve` turns an address string of unknown format into a `DecodedAddress`
by trying each encoding scheme in turn. `render` turns a `DecodedAddress`
back into a string of any format.
"""

from __future__ import annotations

import logging
import typing as t
from dataclasses import dataclass

import construct as c
from typing_extensions import Self

from . import base58, cashaddr
from .exceptions import InvalidAddress
from .formats import (
    CANDIDATE_PREFIXES,
    Format,
    Type,
    lookup_prefix,
    lookup_version_byte,
    prefix_for,
    version_byte,
)
from .network import Mode, Network
from .utils import HASH_LENGTH, VersionedHash, to_bytes

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedAddress:
    hash: bytes
    format: Format
    network: Network
    type: Type

    def __post_init__(self) -> None:
        """Normalize and validate the hash."""
        try:
            hash_bytes = to_bytes(self.hash)
        except (TypeError, ValueError) as e:
            raise InvalidAddress(str(e)) from e
        if len(hash_bytes) != HASH_LENGTH:
            raise InvalidAddress(f"Invalid hash length {len(hash_bytes)}")
        object.__setattr__(self, "hash", hash_bytes)
        object.__setattr__(self, "format", Format(self.format))
        object.__setattr__(self, "network", Network(self.network))
        object.__setattr__(self, "type", Type(self.type))

    @classmethod
    def from_base58_payload(cls, payload: bytes, mode: Mode) -> Self | None:
        """Build from a version byte + hash payload, if the version byte is known in `mode`."""
        parsed = VersionedHash.parse(payload)
        key = lookup_version_byte(parsed.version, mode)
        if key is None:
            return None
        fmt, network, type = key
        return cls(parsed.hash, fmt, network, type)


Attempt = t.Callable[[str, Mode], t.Optional[DecodedAddress]]


def _attempt_base58(address: str, mode: Mode) -> DecodedAddress | None:
    try:
        payload = base58.b58check_decode(address)
        return DecodedAddress.from_base58_payload(payload, mode)
    except (ValueError, c.ConstructError) as e:
        LOG.debug("base58: %s", e)
        return None


def _decode_prefixed(address: str, fmt: Format, mode: Mode) -> DecodedAddress | None:
    try:
        prefix, kind, hash_bytes = cashaddr.decode(address)
    except ValueError as e:
        LOG.debug("%s: %s", fmt.value, e)
        return None
    network = lookup_prefix(fmt, prefix, mode)
    if network is None:
        LOG.debug("%s: prefix %r not known in %s mode", fmt.value, prefix, mode.value)
        return None
    if len(hash_bytes) != HASH_LENGTH:
        LOG.debug("%s: unsupported hash length %d", fmt.value, len(hash_bytes))
        return None
    return DecodedAddress(hash_bytes, fmt, network, Type.from_cashaddr_type(kind))


def _prefixed_attempt(fmt: Format) -> Attempt:
    def attempt(address: str, mode: Mode) -> DecodedAddress | None:
        if cashaddr.SEPARATOR in address:
            return _decode_prefixed(address, fmt, mode)
        uppercase = address.upper() == address
        for prefix in CANDIDATE_PREFIXES[fmt, mode]:
            if uppercase:
                prefix = prefix.upper()
            decoded = _decode_prefixed(prefix + cashaddr.SEPARATOR + address, fmt, mode)
            if decoded is not None:
                return decoded
        return None

    attempt.__name__ = f"_attempt_{fmt.value}"
    return attempt


SCHEMES: tuple[Attempt, ...] = (
    _attempt_base58,
    _prefixed_attempt(Format.CASHADDR),
    _prefixed_attempt(Format.SLPADDR),
)
"""Decoding schemes in the order they are tried."""


def first_success(attempts: t.Iterable[Attempt], address: str, mode: Mode) -> DecodedAddress | None:
    for attempt in attempts:
        decoded = attempt(address, mode)
        if decoded is not None:
            return decoded
    return None


def resolve(address: str, mode: Mode) -> DecodedAddress:
    """Decode an address in any supported format.

    Raises `InvalidAddress` if no scheme accepts the address in the given mode.
    """
    if not isinstance(address, str):
        raise InvalidAddress
    decoded = first_success(SCHEMES, address, mode)
    if decoded is None:
        LOG.debug("no scheme accepted %r in %s mode", address, mode.value)
        raise InvalidAddress
    return decoded


def render_with_prefix(decoded: DecodedAddress, prefix: str) -> str:
    """Encode as a cashaddr-family string with an explicit prefix."""
    return cashaddr.encode(prefix, decoded.type.to_cashaddr_type(), decoded.hash)


def render(decoded: DecodedAddress, target: Format) -> str:
    """Encode the decoded address in the target format.

    Raises `UnsupportedEncoding` if the target format has no encoding for the
    address' network and type.
    """
    target = Format(target)
    if target.is_base58:
        version = version_byte(target, decoded.network, decoded.type)
        payload = VersionedHash.build(dict(version=version, hash=decoded.hash))
        return base58.b58check_encode(payload)
    return render_with_prefix(decoded, prefix_for(target, decoded.network))
