import pytest

import bchaddr
from bchaddr import Format, InvalidAddress, Network, Type, UnsupportedEncoding, base58, cashaddr

ZERO_HASH = bytes(20)
ZERO_LEGACY = "1111111111111111111114oLvT2"

# fmt: off
# legacy, cashaddr
LEGACY_CASHADDR = (
    ("1BpEi6DfDAUFd7GtittLSdBeYJvcoaVggu", "bitcoincash:qpm2qsznhks23z7629mms6s4cwef74vcwvy22gdx6a"),
    ("1KXrWXciRDZUpQwQmuM1DbwsKDLYAYsVLR", "bitcoincash:qr95sy3j9xwd2ap32xkykttr4cvcu7as4y0qverfuy"),
    ("16w1D5WRVKJuZUsSRzdLp9w3YGcgoxDXb", "bitcoincash:qqq3728yw0y47sqn6l2na30mcw6zm78dzqre909m2r"),
    ("3CWFddi6m4ndiGyKqzYvsFYagqDLPVMTzC", "bitcoincash:ppm2qsznhks23z7629mms6s4cwef74vcwvn0h829pq"),
    ("3LDsS579y7sruadqu11beEJoTjdFiFCdX4", "bitcoincash:pr95sy3j9xwd2ap32xkykttr4cvcu7as4yc93ky28e"),
    ("31nwvkZwyPdgzjBJZXfDmSWsC4ZLKpYyUw", "bitcoincash:pqq3728yw0y47sqn6l2na30mcw6zm78dzq5ucqzc37"),
)
# fmt: on

REGTEST_CASHADDR = "bchreg:qr7fzmep8g7h7ymfxy74lgc0v950j3r295m39d8z59"
TESTNET_CASHADDR = "bchtest:qr7fzmep8g7h7ymfxy74lgc0v950j3r295pdnvy3hr"
REGTEST_HASH = bytes.fromhex("fc916f213a3d7f1369313d5fa30f6168f9446a2d")


def test_zero_hash_legacy():
    assert base58.b58check_encode(bytes([0]) + ZERO_HASH) == ZERO_LEGACY
    assert bchaddr.detect_address_format(ZERO_LEGACY) is Format.LEGACY
    assert bchaddr.detect_address_network(ZERO_LEGACY) is Network.MAINNET
    assert bchaddr.detect_address_type(ZERO_LEGACY) is Type.P2PKH


def test_zero_hash_translations():
    expected = cashaddr.encode("bitcoincash", cashaddr.CashaddrType.P2PKH, ZERO_HASH)
    assert bchaddr.to_cash_address(ZERO_LEGACY) == expected
    assert bchaddr.to_slp_address(bchaddr.to_cash_address(ZERO_LEGACY)) == bchaddr.to_slp_address(ZERO_LEGACY)
    assert bchaddr.to_slp_address(ZERO_LEGACY) == cashaddr.encode(
        "simpleledger", cashaddr.CashaddrType.P2PKH, ZERO_HASH
    )


@pytest.mark.parametrize("legacy, cash", LEGACY_CASHADDR)
def test_legacy_cashaddr_pairs(legacy, cash):
    assert bchaddr.to_cash_address(legacy) == cash
    assert bchaddr.to_legacy_address(cash) == legacy
    assert bchaddr.to_legacy_address(cash.split(":")[1]) == legacy
    assert bchaddr.to_legacy_address(bchaddr.to_bitpay_address(cash)) == legacy
    assert bchaddr.to_cash_address(bchaddr.to_slp_address(legacy)) == cash


@pytest.mark.parametrize("legacy, cash", LEGACY_CASHADDR)
def test_detection(legacy, cash):
    expected_type = Type.P2PKH if cash.startswith("bitcoincash:q") else Type.P2SH
    bitpay = bchaddr.to_bitpay_address(legacy)
    slp = bchaddr.to_slp_address(legacy)
    for address, fmt in ((legacy, Format.LEGACY), (bitpay, Format.BITPAY), (cash, Format.CASHADDR), (slp, Format.SLPADDR)):
        assert bchaddr.detect_address_format(address) is fmt
        assert bchaddr.detect_address_network(address) is Network.MAINNET
        assert bchaddr.detect_address_type(address) is expected_type
        assert bchaddr.is_mainnet_address(address)
        assert not bchaddr.is_testnet_address(address)
        assert bchaddr.is_p2pkh_address(address) == (expected_type is Type.P2PKH)
        assert bchaddr.is_p2sh_address(address) == (expected_type is Type.P2SH)


def test_format_predicates():
    legacy, cash = LEGACY_CASHADDR[0]
    bitpay = bchaddr.to_bitpay_address(legacy)
    slp = bchaddr.to_slp_address(legacy)
    assert bchaddr.is_legacy_address(legacy)
    assert not bchaddr.is_legacy_address(cash)
    assert bchaddr.is_bitpay_address(bitpay)
    assert not bchaddr.is_bitpay_address(legacy)
    assert bchaddr.is_cash_address(cash)
    assert not bchaddr.is_cash_address(slp)
    assert bchaddr.is_slp_address(slp)
    assert not bchaddr.is_slp_address(bitpay)


@pytest.mark.parametrize(
    "predicate",
    (
        bchaddr.is_legacy_address,
        bchaddr.is_bitpay_address,
        bchaddr.is_cash_address,
        bchaddr.is_slp_address,
        bchaddr.is_mainnet_address,
        bchaddr.is_testnet_address,
        bchaddr.is_regtest_address,
        bchaddr.is_p2pkh_address,
        bchaddr.is_p2sh_address,
    ),
)
def test_predicates_propagate_errors(predicate):
    with pytest.raises(InvalidAddress):
        predicate("not an address")


def test_translation_short_circuits():
    legacy, cash = LEGACY_CASHADDR[0]
    body = cash.split(":")[1]
    assert bchaddr.to_legacy_address(legacy) is legacy
    assert bchaddr.to_cash_address(body) == body
    bitpay = bchaddr.to_bitpay_address(legacy)
    assert bchaddr.to_bitpay_address(bitpay) is bitpay


@pytest.mark.parametrize("address", [pair[0] for pair in LEGACY_CASHADDR] + [TESTNET_CASHADDR])
def test_to_cash_address_idempotent(address):
    once = bchaddr.to_cash_address(address)
    assert bchaddr.to_cash_address(once) == once


def test_testnet():
    assert bchaddr.detect_address_network(TESTNET_CASHADDR) is Network.TESTNET
    assert bchaddr.is_testnet_address(TESTNET_CASHADDR)
    legacy = bchaddr.to_legacy_address(TESTNET_CASHADDR)
    assert base58.b58check_decode(legacy) == bytes([111]) + REGTEST_HASH
    assert bchaddr.to_cash_address(legacy) == TESTNET_CASHADDR
    assert bchaddr.to_slp_address(TESTNET_CASHADDR).startswith("slptest:")


def test_regtest_requires_flag():
    assert not bchaddr.is_valid_address(REGTEST_CASHADDR)
    assert bchaddr.is_valid_address(REGTEST_CASHADDR, regtest=True)
    with pytest.raises(InvalidAddress):
        bchaddr.detect_address_network(REGTEST_CASHADDR)
    assert bchaddr.detect_address_network(REGTEST_CASHADDR, regtest=True) is Network.REGTEST
    assert bchaddr.is_regtest_address(REGTEST_CASHADDR, regtest=True)
    assert bchaddr.is_cash_address(REGTEST_CASHADDR, regtest=True)
    assert not bchaddr.is_valid_address(TESTNET_CASHADDR, regtest=True)


def test_regtest_translations():
    legacy = bchaddr.to_legacy_address(REGTEST_CASHADDR, regtest=True)
    assert bchaddr.detect_address_network(legacy, regtest=True) is Network.REGTEST
    assert bchaddr.to_cash_address(legacy, regtest=True) == REGTEST_CASHADDR
    slp = bchaddr.to_slp_address(REGTEST_CASHADDR, regtest=True)
    assert slp.startswith("slpreg:")
    assert bchaddr.is_slp_address(slp, regtest=True)
    with pytest.raises(InvalidAddress):
        bchaddr.to_bitpay_address(REGTEST_CASHADDR)


def test_bitpay_has_no_regtest_encoding():
    decoded = bchaddr.decode_address(REGTEST_CASHADDR, regtest=True)
    with pytest.raises(UnsupportedEncoding):
        bchaddr.encode_as_bitpay(decoded)
    assert bchaddr.is_valid_address(REGTEST_CASHADDR, regtest=True)


def test_forced_prefix_encodings():
    decoded = bchaddr.decode_address(LEGACY_CASHADDR[0][1])
    cash = bchaddr.encode_as_cashaddr(decoded)
    assert bchaddr.encode_as_mainnetaddr(decoded) == cash

    regtest = bchaddr.encode_as_regtestaddr(decoded)
    assert regtest.startswith("bchreg:")
    assert bchaddr.decode_address(regtest, regtest=True).hash == decoded.hash

    slp_regtest = bchaddr.encode_as_slp_regtestaddr(decoded)
    assert slp_regtest.startswith("slpreg:")
    assert bchaddr.detect_address_format(slp_regtest, regtest=True) is Format.SLPADDR

    testnet = bchaddr.encode_as_testnetaddr(decoded)
    assert bchaddr.detect_address_network(testnet) is Network.TESTNET


def test_network_translations():
    assert bchaddr.to_testnet_address(REGTEST_CASHADDR, regtest=True) == TESTNET_CASHADDR
    assert bchaddr.to_regtest_address(TESTNET_CASHADDR) == REGTEST_CASHADDR
    mainnet = bchaddr.to_mainnet_address(TESTNET_CASHADDR)
    assert bchaddr.is_mainnet_address(mainnet)
    assert bchaddr.decode_address(mainnet).hash == REGTEST_HASH


def test_slp_regtest_translation():
    slp_regtest = bchaddr.to_slp_regtest_address(TESTNET_CASHADDR)
    assert slp_regtest.startswith("slpreg:")
    decoded = bchaddr.decode_address(slp_regtest, regtest=True)
    assert decoded.format is Format.SLPADDR
    assert decoded.network is Network.REGTEST
    assert decoded.hash == REGTEST_HASH
    assert bchaddr.to_slp_regtest_address(REGTEST_CASHADDR, regtest=True) == slp_regtest


def test_encode_as_matches_translation():
    legacy, cash = LEGACY_CASHADDR[3]
    decoded = bchaddr.decode_address(cash)
    assert bchaddr.encode_as_legacy(decoded) == legacy
    assert bchaddr.encode_as_bitpay(decoded) == bchaddr.to_bitpay_address(legacy)
    assert bchaddr.encode_as_slpaddr(decoded) == bchaddr.to_slp_address(cash)


@pytest.mark.parametrize(
    "value",
    (
        "not an address",
        123,
        None,
        "1BpEi6DfDAUFd7GtittLSdBeYJvcoaVggv",
        "bitcoincash:qpm2qsznhks23z7629mms6s4cwef74vcwvy22gdx6b",
        "BITCOINCASH:QPM2QSZNH\u212aS23Z7629MMS6S4CWEF74VCWVY22GDX6A",
        "",
    ),
)
def test_invalid(value):
    assert not bchaddr.is_valid_address(value)
    with pytest.raises(InvalidAddress):
        bchaddr.decode_address(value)


def test_invalid_address_message():
    with pytest.raises(InvalidAddress, match="invalid Bitcoin Cash address"):
        bchaddr.detect_address_format("not an address")


def test_enum_values():
    decoded = bchaddr.decode_address(ZERO_LEGACY)
    assert decoded.format == "legacy"
    assert decoded.network == "mainnet"
    assert decoded.type == "p2pkh"
