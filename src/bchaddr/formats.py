from __future__ import annotations

import typing as t
from enum import Enum
from types import MappingProxyType

from .cashaddr import CashaddrType
from .exceptions import UnsupportedEncoding
from .network import ALL_NETWORKS, Mode, Network


class Format(str, Enum):
    LEGACY = "legacy"
    BITPAY = "bitpay"
    CASHADDR = "cashaddr"
    SLPADDR = "slpaddr"

    @property
    def is_base58(self) -> bool:
        return self in BASE58_FORMATS


class Type(str, Enum):
    P2PKH = "p2pkh"
    P2SH = "p2sh"

    def to_cashaddr_type(self) -> CashaddrType:
        return CashaddrType[self.name]

    @classmethod
    def from_cashaddr_type(cls, kind: CashaddrType) -> Type:
        return cls[CashaddrType(kind).name]


BASE58_FORMATS = (Format.LEGACY, Format.BITPAY)
PREFIX_FORMATS = (Format.CASHADDR, Format.SLPADDR)


def _build_version_bytes() -> dict[tuple[Format, Network, Type], int]:
    table = {}
    for params in ALL_NETWORKS:
        table[Format.LEGACY, params.network, Type.P2PKH] = params.legacy_p2pkh_version
        table[Format.LEGACY, params.network, Type.P2SH] = params.legacy_p2sh_version
    for params in ALL_NETWORKS:
        if params.bitpay_p2pkh_version is not None:
            table[Format.BITPAY, params.network, Type.P2PKH] = params.bitpay_p2pkh_version
        if params.bitpay_p2sh_version is not None:
            table[Format.BITPAY, params.network, Type.P2SH] = params.bitpay_p2sh_version
    return table


def _build_prefixes() -> dict[tuple[Format, Network], str]:
    table = {}
    for params in ALL_NETWORKS:
        table[Format.CASHADDR, params.network] = params.cashaddr_prefix
        table[Format.SLPADDR, params.network] = params.slpaddr_prefix
    return table


VERSION_BYTES: t.Mapping[tuple[Format, Network, Type], int] = MappingProxyType(
    _build_version_bytes()
)
"""Version byte of each base58 address kind.

Insertion order puts legacy entries first. Reverse lookups rely on that to
report the legacy format for the testnet bytes that bitpay shares.
"""

PREFIXES: t.Mapping[tuple[Format, Network], str] = MappingProxyType(_build_prefixes())
"""Prefix of each cashaddr-family format on each network."""

CANDIDATE_PREFIXES: t.Mapping[tuple[Format, Mode], tuple[str, ...]] = MappingProxyType(
    {
        (Format.CASHADDR, Mode.STANDARD): ("bitcoincash", "bchtest"),
        (Format.CASHADDR, Mode.REGTEST): ("regtest", "bchreg"),
        (Format.SLPADDR, Mode.STANDARD): ("simpleledger", "slptest"),
        (Format.SLPADDR, Mode.REGTEST): ("slpreg",),
    }
)
"""Prefixes tried, in order, for an address given without one."""


def version_byte(fmt: Format, network: Network, type: Type) -> int:
    try:
        return VERSION_BYTES[fmt, network, type]
    except KeyError:
        raise UnsupportedEncoding(
            f"No {fmt.value} version byte for {network.value} {type.value}"
        ) from None


def prefix_for(fmt: Format, network: Network) -> str:
    try:
        return PREFIXES[fmt, network]
    except KeyError:
        raise UnsupportedEncoding(f"No {fmt.value} prefix for {network.value}") from None


def lookup_version_byte(version: int, mode: Mode) -> tuple[Format, Network, Type] | None:
    """Find the base58 address kind of a version byte among the networks of `mode`."""
    for key, value in VERSION_BYTES.items():
        if value == version and key[1] in mode.networks:
            return key
    return None


def lookup_prefix(fmt: Format, prefix: str, mode: Mode) -> Network | None:
    """Find the network a prefix of format `fmt` belongs to, among the networks of `mode`."""
    for network in mode.networks:
        if PREFIXES.get((fmt, network)) == prefix:
            return network
    return None
