# topmark:header:start
#
#   project      : Akaer
#   file         : addresses.py
#   file_relpath : src/akaer/core/addresses.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Address validation and resolution.

Validation classifies a string as an IPv4 or IPv6 address without raising:
malformed input is simply not an address.

Resolution turns the configuration into the ordered list of addresses an
``add``/``remove`` batch operates on:

- an explicit ``addresses`` list is filtered through the validators and
  de-duplicated, keeping the first-seen order;
- otherwise ``aliases`` addresses are generated by stepping from
  ``start_address`` one address at a time.

An unparsable start address, or one whose family does not match the requested
type, yields an empty list: there is nothing to do, which is not an error.
"""

from __future__ import annotations

import ipaddress
import re
from enum import Enum
from typing import TYPE_CHECKING, Callable, Final

from akaer.config.logging import get_logger
from akaer.constants import DEFAULT_ALIAS_COUNT

if TYPE_CHECKING:
    from collections.abc import Iterable

    from akaer.config import Config
    from akaer.config.logging import AkaerLogger

logger: AkaerLogger = get_logger(__name__)


class AddressType(str, Enum):
    """Address families a resolution can be restricted to.

    Attributes:
        IPV4: IPv4 addresses only.
        IPV6: IPv6 addresses only.
        ALL: Both families.
    """

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    ALL = "all"


_IPV4_RE: Final[re.Pattern[str]] = re.compile(
    r"([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})"
)

_HEX: Final[str] = r"[0-9A-Fa-f]{1,4}"
_HEX_SEQ: Final[str] = rf"{_HEX}(?::{_HEX})*"

# Complete IPv6 forms, matched against the whole string.
_IPV6_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(_HEX_SEQ),
    re.compile(rf"{_HEX_SEQ}::(?:{_HEX_SEQ})?"),
    re.compile(rf"::(?:{_HEX_SEQ})?"),
)

# IPv6 prefixes of the IPv4-embedded forms; the remainder must be an IPv4 address.
_IPV6_IPV4_PREFIXES: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(rf"{_HEX_SEQ}:"),
    re.compile(rf"{_HEX_SEQ}::(?:{_HEX_SEQ}:)?"),
    re.compile(rf"::(?:{_HEX_SEQ}:)?"),
)


def is_ipv4(value: object) -> bool:
    """Return True if ``value`` is a dotted-quad IPv4 address.

    Four dot-separated groups of 1 to 3 digits, each lower than 256, with
    nothing before or after. Never raises: ``None`` and non-strings are False.
    """
    if not isinstance(value, str):
        return False
    match: re.Match[str] | None = _IPV4_RE.fullmatch(value)
    return match is not None and all(int(group) < 256 for group in match.groups())


def is_ipv6(value: object) -> bool:
    """Return True if ``value`` is an IPv6 address.

    Accepts plain hextet sequences, forms with one ``::`` compression and
    IPv4-embedded forms whose trailing part is a valid IPv4 address. Checks are
    independent and evaluated in order; the first match wins. Never raises.
    """
    if not isinstance(value, str) or not value:
        return False

    for pattern in _IPV6_PATTERNS:
        if pattern.fullmatch(value):
            return True

    for prefix in _IPV6_IPV4_PREFIXES:
        match: re.Match[str] | None = prefix.match(value)
        if match and is_ipv4(value[match.end() :]):
            return True

    return False


_VALIDATORS: Final[dict[AddressType, tuple[Callable[[object], bool], ...]]] = {
    AddressType.IPV4: (is_ipv4,),
    AddressType.IPV6: (is_ipv6,),
    AddressType.ALL: (is_ipv4, is_ipv6),
}

_FAMILY_VERSIONS: Final[dict[AddressType, int]] = {
    AddressType.IPV4: 4,
    AddressType.IPV6: 6,
}


def filter_addresses(
    addresses: Iterable[str],
    address_type: AddressType = AddressType.ALL,
) -> list[str]:
    """Keep the valid addresses of the requested type, de-duplicated in first-seen order."""
    validators = _VALIDATORS[address_type]
    kept: dict[str, None] = {}
    for address in addresses:
        if any(check(address) for check in validators):
            kept.setdefault(address, None)
        else:
            logger.debug("Skipping %r: not a valid %s address", address, address_type.value)
    return list(kept)


def generate_addresses(
    start_address: str,
    count: int,
    address_type: AddressType = AddressType.ALL,
) -> list[str]:
    """Return ``count`` consecutive addresses starting at ``start_address``.

    Args:
        start_address (str): The first address of the sequence.
        count (int): How many addresses to generate; non-positive means the default (5).
        address_type (AddressType): Restrict the sequence to one family.

    Returns:
        list[str]: The generated addresses, or an empty list when the start
            address is invalid or of the wrong family. The sequence stops early
            at the last address of the family.
    """
    try:
        current: ipaddress.IPv4Address | ipaddress.IPv6Address = ipaddress.ip_address(
            start_address
        )
    except ValueError:
        logger.debug("Start address %r is not a valid IP address", start_address)
        return []

    expected: int | None = _FAMILY_VERSIONS.get(address_type)
    if expected is not None and current.version != expected:
        logger.debug("Start address %s is not an %s address", current, address_type.value)
        return []

    total: int = count if count > 0 else DEFAULT_ALIAS_COUNT
    rv: list[str] = [str(current)]
    while len(rv) < total:
        try:
            current = current + 1
        except ValueError:
            logger.debug(
                "Address space exhausted after %s: generated %d of %d addresses",
                current,
                len(rv),
                total,
            )
            break
        rv.append(str(current))

    logger.trace("Generated addresses: %s", rv)
    return rv


def resolve_addresses(config: Config, address_type: AddressType = AddressType.ALL) -> list[str]:
    """Return the ordered list of addresses to operate on.

    Args:
        config (Config): The runtime configuration.
        address_type (AddressType): Restrict the result to one family.

    Returns:
        list[str]: The explicit addresses filtered by ``address_type`` when the
            configuration lists any, the generated sequence otherwise.
    """
    if config.addresses:
        return filter_addresses(config.addresses, address_type)
    return generate_addresses(config.start_address, config.aliases, address_type)
