# topmark:header:start
#
#   project      : Akaer
#   file         : test_addresses.py
#   file_relpath : tests/core/test_addresses.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Tests for address validation and resolution."""

from __future__ import annotations

from akaer.core.addresses import (
    AddressType,
    filter_addresses,
    generate_addresses,
    is_ipv4,
    is_ipv6,
    resolve_addresses,
)
from tests.conftest import make_config, parametrize

MIXED_ADDRESSES: list[str] = [
    "10.0.0.1",
    "::1",
    "INVALID 1",
    "10.0.0.2",
    "INVALID 2",
    "2001:0db8:0::0:1428:57ab",
]


@parametrize(
    "value",
    ["10.0.0.1", "192.168.0.255", "0.0.0.0", "255.255.255.255", "1.22.133.4"],
)
def test_is_ipv4_accepts_dotted_quads(value: str) -> None:
    assert is_ipv4(value) is True


@parametrize(
    "value",
    [
        "10.0.0.256",
        "10.0.0.-1",
        None,
        "",
        "10.0.0",
        "10.0.0.1.2",
        " 10.0.0.1",
        "10.0.0.1 ",
        "10.0.0.1000",
        "::1",
        "INVALID",
        10,
    ],
)
def test_is_ipv4_rejects_everything_else(value: object) -> None:
    assert is_ipv4(value) is False


@parametrize(
    "value",
    [
        "::1",
        "::2:1",
        "2001::",
        "2011::10.0.0.1",
        "2011::0:10.0.0.1",
        "2001:0db8:0000:0000:0000:1428:57ab",
        "2001:0db8:0::0:1428:57ab",
        "fe80:0:0:0:0:0:0:1",
        "::ffff:192.168.0.1",
        "::",
    ],
)
def test_is_ipv6_accepts_ipv6_forms(value: str) -> None:
    assert is_ipv6(value) is True


@parametrize(
    "value",
    ["::H", "192.168.0.256", "10.0.0.1", "INVALID", None, "", "2011::10.0.0.256", ":::1"],
)
def test_is_ipv6_rejects_everything_else(value: object) -> None:
    assert is_ipv6(value) is False


def test_is_ipv6_accepts_a_bare_hextet() -> None:
    """A lone group of 1-4 hex digits is a plain hextet sequence."""
    assert is_ipv6("10") is True
    assert is_ipv6("1428") is True


def test_filter_addresses_deduplicates_in_first_seen_order() -> None:
    addresses = ["10.0.0.2", "10.0.0.1", "10.0.0.2", "::1", "10.0.0.1"]
    assert filter_addresses(addresses) == ["10.0.0.2", "10.0.0.1", "::1"]


def test_resolve_explicit_addresses_all() -> None:
    config = make_config(addresses=MIXED_ADDRESSES)
    assert resolve_addresses(config) == [
        "10.0.0.1",
        "::1",
        "10.0.0.2",
        "2001:0db8:0::0:1428:57ab",
    ]


def test_resolve_explicit_addresses_ipv4() -> None:
    config = make_config(addresses=MIXED_ADDRESSES)
    assert resolve_addresses(config, AddressType.IPV4) == ["10.0.0.1", "10.0.0.2"]


def test_resolve_explicit_addresses_ipv6() -> None:
    config = make_config(addresses=MIXED_ADDRESSES)
    assert resolve_addresses(config, AddressType.IPV6) == ["::1", "2001:0db8:0::0:1428:57ab"]


def test_resolve_explicit_addresses_without_valid_entries() -> None:
    config = make_config(addresses=["INVALID", "10.0.0.300"])
    assert resolve_addresses(config) == []


def test_generate_from_start_address_with_default_count() -> None:
    config = make_config(start_address="10.0.1.1")
    assert resolve_addresses(config) == [
        "10.0.1.1",
        "10.0.1.2",
        "10.0.1.3",
        "10.0.1.4",
        "10.0.1.5",
    ]


def test_generate_count_from_default_start() -> None:
    config = make_config(aliases=3)
    assert resolve_addresses(config) == ["10.0.0.1", "10.0.0.2", "10.0.0.3"]


@parametrize("count", [0, -1])
def test_generate_non_positive_count_falls_back_to_five(count: int) -> None:
    config = make_config(aliases=count)
    assert len(resolve_addresses(config)) == 5


def test_generate_crosses_octet_boundaries() -> None:
    assert generate_addresses("10.0.0.254", 4) == [
        "10.0.0.254",
        "10.0.0.255",
        "10.0.1.0",
        "10.0.1.1",
    ]


def test_generate_ipv6_sequence() -> None:
    config = make_config(start_address="::1", aliases=3)
    assert resolve_addresses(config, AddressType.IPV6) == ["::1", "::2", "::3"]


def test_generate_family_mismatch_yields_nothing() -> None:
    assert resolve_addresses(make_config(start_address="::1"), AddressType.IPV4) == []
    assert resolve_addresses(make_config(start_address="10.0.0.1"), AddressType.IPV6) == []


@parametrize("start", ["INVALID", "", "10.0.0.256"])
def test_generate_from_invalid_start_yields_nothing(start: str) -> None:
    assert resolve_addresses(make_config(start_address=start)) == []


def test_generate_stops_at_the_end_of_the_address_space() -> None:
    assert generate_addresses("255.255.255.254", 5) == ["255.255.255.254", "255.255.255.255"]


def test_resolve_is_repeatable() -> None:
    config = make_config(addresses=MIXED_ADDRESSES)
    assert resolve_addresses(config) == resolve_addresses(config)

    generated = make_config(start_address="10.0.2.1", aliases=4)
    assert resolve_addresses(generated) == resolve_addresses(generated)
