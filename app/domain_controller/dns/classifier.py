"""DNS zone classification and matching.

All functions are pure: the result depends only on the arguments and
the explicitly passed topology. DNS names are compared ignoring case.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Iterable

from config import DNSTopologySettings

from .exceptions import DNSPreconditionError

_IPV6_NIBBLES = 32


def normalize_name(name: str) -> str:
    """Drop the trailing root dot of an absolute name."""
    return name[:-1] if name.endswith(".") else name


def _same_name(first: str, second: str) -> bool:
    return (
        normalize_name(first).casefold()
        == normalize_name(second).casefold()
    )


def reverse_zone_suffix(
    name: str,
    topology: DNSTopologySettings,
) -> str | None:
    """Get the configured reverse suffix name ends with.

    Suffixes are checked in configured order, first match wins. A bare
    suffix without network labels is not a reverse zone.
    """
    folded = normalize_name(name).casefold()
    for suffix in topology.reverse_zone_suffixes:
        suffix_folded = suffix.casefold()
        if folded.endswith(suffix_folded) and len(folded) > len(suffix_folded):
            return suffix
    return None


def is_reverse_zone(name: str, topology: DNSTopologySettings) -> bool:
    return reverse_zone_suffix(name, topology) is not None


def is_excluded(name: str, patterns: Iterable[re.Pattern[str]]) -> bool:
    """Check if any pattern matches the whole name."""
    return any(pattern.fullmatch(name) for pattern in patterns)


def is_excluded_zone(name: str, topology: DNSTopologySettings) -> bool:
    return is_excluded(name, topology.excluded_zone_patterns)


def is_excluded_record(name: str, topology: DNSTopologySettings) -> bool:
    return is_excluded(name, topology.excluded_record_patterns)


def find_owning_forward_zone(
    hostname: str,
    zones: Iterable[str],
    topology: DNSTopologySettings,
) -> str | None:
    """Find the forward zone owning hostname.

    The hostname is shortened one leftmost label at a time and every
    residual still containing a dot is compared with the candidate
    zones, so the most specific zone wins. A hostname without any dot
    has no owning zone.

    :param str hostname: host or fully qualified host name
    :param Iterable[str] zones: candidate zone names
    :param DNSTopologySettings topology: topology
    :return str | None: owning zone name as given in ``zones``
    """
    candidates = [
        zone
        for zone in zones
        if not is_reverse_zone(zone, topology)
        and not is_excluded_zone(zone, topology)
    ]

    residual = normalize_name(hostname)
    while "." in residual:
        for zone in candidates:
            if _same_name(residual, zone):
                return zone
        residual = residual.split(".", 1)[1]
    return None


def _parse_ip(ip: str) -> IPv4Address | IPv6Address:
    try:
        return ip_address(ip.strip())
    except ValueError as err:
        raise DNSPreconditionError("Invalid IP address", ip=ip) from err


def ip_to_dotted(ip: str) -> str:
    """Get dotted form of an address.

    IPv4 addresses keep their dotted octets, IPv6 addresses become 32
    dot separated hex nibbles, most significant first.
    """
    address = _parse_ip(ip)
    if isinstance(address, IPv4Address):
        return str(address)
    return ".".join(address.exploded.replace(":", ""))


def _dotted_to_ip(dotted: str, version: int) -> str:
    if version == 4:
        try:
            return str(IPv4Address(dotted))
        except ValueError as err:
            raise DNSPreconditionError(
                "Reverse name is not an IPv4 address",
                ip=dotted,
            ) from err

    nibbles = dotted.split(".")
    if len(nibbles) != _IPV6_NIBBLES or any(len(n) != 1 for n in nibbles):
        raise DNSPreconditionError(
            "Reverse name is not an IPv6 address",
            ip=dotted,
        )
    hextets = [
        "".join(nibbles[index:index + 4])
        for index in range(0, _IPV6_NIBBLES, 4)
    ]
    try:
        return str(IPv6Address(":".join(hextets)))
    except ValueError as err:
        raise DNSPreconditionError(
            "Reverse name is not an IPv6 address",
            ip=dotted,
        ) from err


def _reverse_zone_network(
    zone_name: str,
    topology: DNSTopologySettings,
) -> tuple[int, str] | None:
    """Get IP version and dotted network prefix of a reverse zone.

    ``1.168.192.in-addr.arpa`` gives ``(4, "192.168.1.")``.
    """
    suffix = reverse_zone_suffix(zone_name, topology)
    if suffix is None:
        return None

    name = normalize_name(zone_name)
    labels = name[: len(name) - len(suffix)].split(".")
    version = 4 if suffix == topology.reverse_zone_suffix_ip4 else 6
    return version, ".".join(reversed(labels)).casefold() + "."


def _ip_version(ip: str) -> int:
    return _parse_ip(ip).version


def ip_matches_reverse_zone(
    ip: str,
    zone_name: str,
    topology: DNSTopologySettings,
) -> bool:
    network = _reverse_zone_network(zone_name, topology)
    if network is None:
        return False
    version, prefix = network
    if version != _ip_version(ip):
        return False
    return ip_to_dotted(ip).startswith(prefix)


def find_owning_reverse_zone(
    ip: str,
    zones: Iterable[str],
    topology: DNSTopologySettings,
) -> str | None:
    """Find the first reverse zone whose network prefix starts ip.

    Overlapping reverse zones are a configuration error and are not
    detected, the first match is returned.
    """
    for zone in zones:
        if is_excluded_zone(zone, topology):
            continue
        if ip_matches_reverse_zone(ip, zone, topology):
            return zone
    return None


def host_label_within_zone(fqdn: str, zone_name: str) -> str:
    """Get the leading label(s) of fqdn inside zone.

    :raises DNSPreconditionError: fqdn is outside of zone
    :return str: relative name, ``@`` for the zone apex
    """
    name = normalize_name(fqdn)
    zone = normalize_name(zone_name)
    if not name or not zone:
        raise DNSPreconditionError(
            "Host and zone names must not be empty",
            host=fqdn,
            zone=zone_name,
        )

    if name.casefold() == zone.casefold():
        return "@"

    if not name.casefold().endswith("." + zone.casefold()):
        raise DNSPreconditionError(
            "Host name must end with zone name",
            host=fqdn,
            zone=zone_name,
        )
    return name[: len(name) - len(zone) - 1]


def ip_to_reverse_label(
    ip: str,
    zone_name: str,
    topology: DNSTopologySettings,
) -> str:
    """Get record name of ip inside reverse zone.

    ``192.168.1.113`` is ``113`` in ``1.168.192.in-addr.arpa`` and
    ``113.1`` in ``168.192.in-addr.arpa``.

    :raises DNSPreconditionError: ip is outside of zone
    """
    if not ip_matches_reverse_zone(ip, zone_name, topology):
        raise DNSPreconditionError(
            "IP address must match reverse zone",
            ip=ip,
            zone=zone_name,
        )

    _, prefix = _reverse_zone_network(zone_name, topology)  # type: ignore
    remainder = ip_to_dotted(ip)[len(prefix):]
    if not remainder:
        raise DNSPreconditionError(
            "IP address is the reverse zone network itself",
            ip=ip,
            zone=zone_name,
        )
    return ".".join(reversed(remainder.split(".")))


def reverse_label_to_ip(
    label: str,
    zone_name: str,
    topology: DNSTopologySettings,
) -> str:
    """Get IP address of a record name inside reverse zone.

    Inverse of :func:`ip_to_reverse_label`. The result is validated
    against the zone again to catch malformed zone names.

    :raises DNSPreconditionError: zone is not a reverse zone or the
        computed address does not belong to it
    """
    network = _reverse_zone_network(zone_name, topology)
    if network is None or not label:
        raise DNSPreconditionError(
            "Reverse record name and reverse zone required",
            name=label,
            zone=zone_name,
        )

    version, prefix = network
    dotted = prefix + ".".join(reversed(normalize_name(label).split(".")))
    ip = _dotted_to_ip(dotted, version)

    if not ip_matches_reverse_zone(ip, zone_name, topology):
        raise DNSPreconditionError(
            "IP address must match reverse zone",
            ip=ip,
            zone=zone_name,
        )
    return ip
