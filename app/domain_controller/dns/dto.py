"""DNS DTO.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from ipaddress import ip_address

from .enums import DNSRecordType, DNSWriteOutcome

_ADDRESS_TYPES = frozenset({DNSRecordType.A, DNSRecordType.AAAA})


def same_record_value(record_type: str, first: str, second: str) -> bool:
    """Compare record values, addresses by parsed value."""
    if record_type.upper() in _ADDRESS_TYPES:
        try:
            return ip_address(first.strip()) == ip_address(second.strip())
        except ValueError:
            pass
    return first == second


@dataclass(frozen=True)
class DNSZoneDTO:
    """DNS zone."""

    name: str
    flags: str | None = None


@dataclass(frozen=True)
class DNSRecordDTO:
    """Single record of a DNS entry."""

    type: str
    value: str
    ttl: int | None = None
    serial: int | None = None
    flags: str | None = None

    def matches(self, record_type: str, value: str) -> bool:
        return self.type.upper() == record_type.upper() and same_record_value(
            record_type,
            self.value,
            value,
        )


@dataclass
class DNSEntryDTO:
    """Named node of a zone with its records."""

    name: str
    records: list[DNSRecordDTO] = field(default_factory=list)

    def has_record(self, record_type: str, value: str) -> bool:
        return any(
            record.matches(record_type, value) for record in self.records
        )


@dataclass(frozen=True)
class DNSWriteResult:
    """Result of one record write."""

    outcome: DNSWriteOutcome
    zone: str | None = None
    name: str | None = None
    type: str | None = None
    value: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class DNSBindResult:
    """Result of a dual-write record creation.

    ``primary`` is the requested record, ``mirrored`` its counterpart
    in the owning reverse or forward zone.
    """

    primary: DNSWriteResult
    mirrored: DNSWriteResult
