"""Dual-write of forward and reverse records.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from functools import partial
from ipaddress import ip_address

from config import DNSTopologySettings
from domain_controller.domain_tool import AbstractDomainTool, DomainToolError
from domain_controller.domain_tool.base import contains_record

from .classifier import (
    find_owning_forward_zone,
    find_owning_reverse_zone,
    host_label_within_zone,
    ip_to_dotted,
    ip_to_reverse_label,
    is_reverse_zone,
    normalize_name,
    reverse_label_to_ip,
)
from .dto import DNSBindResult, DNSWriteResult
from .enums import DNSRecordType, DNSWriteOutcome
from .exceptions import DNSPreconditionError, DNSZoneNotFoundError
from .utils import log

_ADDRESS_TYPES = {4: DNSRecordType.A, 6: DNSRecordType.AAAA}


def _address_record_type(ip: str) -> DNSRecordType:
    ip_to_dotted(ip)
    return _ADDRESS_TYPES[ip_address(ip.strip()).version]


def _canonical_ip(ip: str) -> str:
    ip_to_dotted(ip)
    return str(ip_address(ip.strip()))


def _skipped(message: str) -> DNSWriteResult:
    return DNSWriteResult(outcome=DNSWriteOutcome.SKIPPED, message=message)


class DNSSynchronizer:
    """Create forward and reverse records as one logical binding.

    The two writes are sequential, not transactional: a failed mirrored
    write leaves the primary record in place and is reported, not raised.
    Retrying is safe because every write checks for an identical record
    first.
    """

    def __init__(
        self,
        domain_tool: AbstractDomainTool,
        topology: DNSTopologySettings,
    ) -> None:
        """Set domain tool and topology."""
        self._domain_tool = domain_tool
        self._topology = topology

    async def record_exists(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> bool:
        """Scan zone for identical (name, type, value) record."""
        entries = await self._domain_tool.list_records(zone)
        return contains_record(entries, name, record_type, value)

    async def _write(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> DNSWriteResult:
        if await self.record_exists(zone, name, record_type, value):
            outcome = DNSWriteOutcome.EXISTS
        else:
            await self._domain_tool.create_record(
                zone,
                name,
                record_type,
                value,
            )
            outcome = DNSWriteOutcome.CREATED

        log.info(f"{record_type} {name} in {zone} -> {value}: {outcome}")
        return DNSWriteResult(
            outcome=outcome,
            zone=zone,
            name=name,
            type=record_type,
            value=value,
        )

    async def _zone_names(self) -> list[str]:
        return [zone.name for zone in await self._domain_tool.list_zones()]

    async def _mirror_reverse(
        self,
        hostname: str,
        ip: str,
    ) -> DNSWriteResult:
        forward_zone = find_owning_forward_zone(
            hostname,
            await self._zone_names(),
            self._topology,
        )
        if forward_zone is None:
            return _skipped(f"No forward zone owns {hostname}")

        return await self._write(
            forward_zone,
            host_label_within_zone(hostname, forward_zone),
            _address_record_type(ip),
            ip,
        )

    async def _mirror_forward(
        self,
        hostname: str,
        ip: str,
    ) -> DNSWriteResult:
        reverse_zone = find_owning_reverse_zone(
            ip,
            [
                name
                for name in await self._zone_names()
                if is_reverse_zone(name, self._topology)
            ],
            self._topology,
        )
        if reverse_zone is None:
            return _skipped(f"No reverse zone owns {ip}")

        return await self._write(
            reverse_zone,
            ip_to_reverse_label(ip, reverse_zone, self._topology),
            DNSRecordType.PTR,
            hostname,
        )

    async def add_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> DNSBindResult:
        """Create record and its counterpart in the owning zone.

        A PTR record in a reverse zone is mirrored by an address record
        in the forward zone owning the target host, an address record
        in a forward zone by a PTR record in the reverse zone owning the
        address. Without an owning counterpart zone the mirrored side is
        skipped.

        :raises DNSPreconditionError: malformed name or address, raised
            before anything is written
        :raises DomainToolError: primary write failed
        :return DNSBindResult: outcome of both sides
        """
        record_type = record_type.upper()
        reverse = is_reverse_zone(zone, self._topology)

        if reverse and record_type == DNSRecordType.PTR:
            ip = reverse_label_to_ip(name, zone, self._topology)
            hostname = normalize_name(value)
            mirror = partial(self._mirror_reverse, hostname, ip)
        elif not reverse and record_type in _ADDRESS_TYPES.values():
            value = _canonical_ip(value)
            if _address_record_type(value) != record_type:
                raise DNSPreconditionError(
                    "Address does not match record type",
                    type=record_type,
                    value=value,
                )
            hostname = (
                normalize_name(zone)
                if name == "@"
                else f"{name}.{normalize_name(zone)}"
            )
            mirror = partial(self._mirror_forward, hostname, value)
        else:
            mirror = None

        primary = await self._write(zone, name, record_type, value)
        if mirror is None:
            return DNSBindResult(
                primary=primary,
                mirrored=_skipped(f"{record_type} records are not mirrored"),
            )

        try:
            mirrored = await mirror()
        except (DomainToolError, DNSZoneNotFoundError) as err:
            log.warning(
                f"Mirrored write for {record_type} {name} in {zone} "
                f"failed: {err}",
            )
            mirrored = DNSWriteResult(
                outcome=DNSWriteOutcome.FAILED,
                message=str(err),
            )

        return DNSBindResult(primary=primary, mirrored=mirrored)

    async def delete_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> None:
        """Delete single record, counterpart is left untouched."""
        await self._domain_tool.delete_record(
            zone,
            name,
            record_type.upper(),
            value,
        )

    async def update_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        old_value: str,
        new_value: str,
    ) -> None:
        """Replace record value, counterpart is left untouched."""
        await self._domain_tool.update_record(
            zone,
            name,
            record_type.upper(),
            old_value,
            new_value,
        )
