"""Detection and translation of Bitcoin Cash addresses.

Every function takes an address in any supported format. Functions with a
`regtest` flag only resolve regtest addresses when it is set, and only
mainnet and testnet addresses when it is not.
"""

from __future__ import annotations

import typing as t

from .address import DecodedAddress, render, render_with_prefix, resolve
from .exceptions import InvalidAddress
from .formats import Format, Type
from .network import MAINNET, REGTEST, TESTNET, Mode, Network


def decode_address(address: str, regtest: bool = False) -> DecodedAddress:
    return resolve(address, Mode.from_regtest(regtest))


def is_valid_address(value: t.Any, regtest: bool = False) -> bool:
    try:
        decode_address(value, regtest)
        return True
    except InvalidAddress:
        return False


def detect_address_format(address: str, regtest: bool = False) -> Format:
    return decode_address(address, regtest).format


def detect_address_network(address: str, regtest: bool = False) -> Network:
    return decode_address(address, regtest).network


def detect_address_type(address: str, regtest: bool = False) -> Type:
    return decode_address(address, regtest).type


# Encoding


def encode_as_legacy(decoded: DecodedAddress) -> str:
    return render(decoded, Format.LEGACY)


def encode_as_bitpay(decoded: DecodedAddress) -> str:
    """Raises `UnsupportedEncoding` for regtest addresses."""
    return render(decoded, Format.BITPAY)


def encode_as_cashaddr(decoded: DecodedAddress) -> str:
    return render(decoded, Format.CASHADDR)


def encode_as_slpaddr(decoded: DecodedAddress) -> str:
    return render(decoded, Format.SLPADDR)


def encode_as_mainnetaddr(decoded: DecodedAddress) -> str:
    """Cashaddr with the mainnet prefix, whatever the network of `decoded`."""
    return render_with_prefix(decoded, MAINNET.cashaddr_prefix)


def encode_as_testnetaddr(decoded: DecodedAddress) -> str:
    """Cashaddr with the testnet prefix, whatever the network of `decoded`."""
    return render_with_prefix(decoded, TESTNET.cashaddr_prefix)


def encode_as_regtestaddr(decoded: DecodedAddress) -> str:
    """Cashaddr with the regtest prefix, whatever the network of `decoded`."""
    return render_with_prefix(decoded, REGTEST.cashaddr_prefix)


def encode_as_slp_regtestaddr(decoded: DecodedAddress) -> str:
    """Slpaddr with the regtest prefix, whatever the network of `decoded`."""
    return render_with_prefix(decoded, REGTEST.slpaddr_prefix)


# Translation


def _translate(address: str, target: Format, regtest: bool) -> str:
    decoded = decode_address(address, regtest)
    if decoded.format is target:
        return address
    return render(decoded, target)


def to_legacy_address(address: str, regtest: bool = False) -> str:
    return _translate(address, Format.LEGACY, regtest)


def to_bitpay_address(address: str) -> str:
    return _translate(address, Format.BITPAY, False)


def to_cash_address(address: str, regtest: bool = False) -> str:
    return _translate(address, Format.CASHADDR, regtest)


def to_slp_address(address: str, regtest: bool = False) -> str:
    return _translate(address, Format.SLPADDR, regtest)


def to_mainnet_address(address: str, regtest: bool = False) -> str:
    return encode_as_mainnetaddr(decode_address(address, regtest))


def to_testnet_address(address: str, regtest: bool = False) -> str:
    return encode_as_testnetaddr(decode_address(address, regtest))


def to_regtest_address(address: str, regtest: bool = False) -> str:
    return encode_as_regtestaddr(decode_address(address, regtest))


def to_slp_regtest_address(address: str, regtest: bool = False) -> str:
    return encode_as_slp_regtestaddr(decode_address(address, regtest))


# Predicates


def is_legacy_address(address: str) -> bool:
    return detect_address_format(address) is Format.LEGACY


def is_bitpay_address(address: str) -> bool:
    return detect_address_format(address) is Format.BITPAY


def is_cash_address(address: str, regtest: bool = False) -> bool:
    return detect_address_format(address, regtest) is Format.CASHADDR


def is_slp_address(address: str, regtest: bool = False) -> bool:
    return detect_address_format(address, regtest) is Format.SLPADDR


def is_mainnet_address(address: str, regtest: bool = False) -> bool:
    return detect_address_network(address, regtest) is Network.MAINNET


def is_testnet_address(address: str, regtest: bool = False) -> bool:
    return detect_address_network(address, regtest) is Network.TESTNET


def is_regtest_address(address: str, regtest: bool = False) -> bool:
    return detect_address_network(address, regtest) is Network.REGTEST


def is_p2pkh_address(address: str, regtest: bool = False) -> bool:
    return detect_address_type(address, regtest) is Type.P2PKH


def is_p2sh_address(address: str, regtest: bool = False) -> bool:
    return detect_address_type(address, regtest) is Type.P2SH


__all__ = [
    "decode_address",
    "is_valid_address",
    "detect_address_format",
    "detect_address_network",
    "detect_address_type",
    "encode_as_legacy",
    "encode_as_bitpay",
    "encode_as_cashaddr",
    "encode_as_slpaddr",
    "encode_as_mainnetaddr",
    "encode_as_testnetaddr",
    "encode_as_regtestaddr",
    "encode_as_slp_regtestaddr",
    "to_legacy_address",
    "to_bitpay_address",
    "to_cash_address",
    "to_slp_address",
    "to_mainnet_address",
    "to_testnet_address",
    "to_regtest_address",
    "to_slp_regtest_address",
    "is_legacy_address",
    "is_bitpay_address",
    "is_cash_address",
    "is_slp_address",
    "is_mainnet_address",
    "is_testnet_address",
    "is_regtest_address",
    "is_p2pkh_address",
    "is_p2sh_address",
]
