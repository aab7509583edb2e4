from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from typing_extensions import Self


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"
    REGTEST = "regtest"


class Mode(Enum):
    """Which networks an address may resolve to.

    Regtest reuses testnet version bytes, so the two cannot be told apart
    from the address alone. The caller picks the partition.
    """

    STANDARD = "standard"
    REGTEST = "regtest"

    @classmethod
    def from_regtest(cls, regtest: bool) -> Self:
        return cls.REGTEST if regtest else cls.STANDARD

    @property
    def networks(self) -> tuple[Network, ...]:
        if self is Mode.REGTEST:
            return (Network.REGTEST,)
        return (Network.MAINNET, Network.TESTNET)


@dataclass(frozen=True)
class NetworkParams:
    network: Network

    legacy_p2pkh_version: int
    legacy_p2sh_version: int
    bitpay_p2pkh_version: int | None
    bitpay_p2sh_version: int | None

    cashaddr_prefix: str
    slpaddr_prefix: str


MAINNET = NetworkParams(
    network=Network.MAINNET,
    legacy_p2pkh_version=0,
    legacy_p2sh_version=5,
    bitpay_p2pkh_version=28,
    bitpay_p2sh_version=40,
    cashaddr_prefix="bitcoincash",
    slpaddr_prefix="simpleledger",
)

TESTNET = NetworkParams(
    network=Network.TESTNET,
    legacy_p2pkh_version=111,
    legacy_p2sh_version=196,
    bitpay_p2pkh_version=111,
    bitpay_p2sh_version=196,
    cashaddr_prefix="bchtest",
    slpaddr_prefix="slptest",
)

# no bitpay encoding exists for regtest
REGTEST = NetworkParams(
    network=Network.REGTEST,
    legacy_p2pkh_version=111,
    legacy_p2sh_version=196,
    bitpay_p2pkh_version=None,
    bitpay_p2sh_version=None,
    cashaddr_prefix="bchreg",
    slpaddr_prefix="slpreg",
)

ALL_NETWORKS = (MAINNET, TESTNET, REGTEST)
