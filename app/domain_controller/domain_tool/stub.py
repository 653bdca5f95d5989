"""In-memory domain tool.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from domain_controller.dns.dto import DNSEntryDTO, DNSRecordDTO, DNSZoneDTO
from domain_controller.dns.exceptions import DNSZoneNotFoundError

from .base import AbstractDomainTool, DomainUserSpec, contains_name
from .exceptions import DomainToolPostConditionError
from .utils import logger_wraps


class StubDomainTool(AbstractDomainTool):
    """Stub client.

    Keeps zones, records, users and groups in memory. Like the real
    tool it does not reject duplicate records.
    """

    def __init__(self) -> None:
        """Set empty state."""
        self._zones: dict[str, dict[str, list[DNSRecordDTO]]] = {}
        self._users: dict[str, str] = {}
        self._groups: set[str] = set()

    def _get_zone(self, zone: str) -> dict[str, list[DNSRecordDTO]]:
        for name, entries in self._zones.items():
            if name.casefold() == zone.casefold():
                return entries
        raise DNSZoneNotFoundError("Zone not found", zone=zone)

    @logger_wraps(is_stub=True)
    async def list_zones(self) -> list[DNSZoneDTO]:
        return [DNSZoneDTO(name=name) for name in self._zones]

    @logger_wraps(is_stub=True)
    async def list_records(self, zone: str) -> list[DNSEntryDTO]:
        return [
            DNSEntryDTO(name=name, records=list(records))
            for name, records in self._get_zone(zone).items()
        ]

    @logger_wraps(is_stub=True)
    async def create_zone(self, zone: str) -> None:
        if contains_name(list(self._zones), zone):
            raise DomainToolPostConditionError(
                "Zone already exists",
                zone=zone,
            )
        self._zones[zone] = {}

    @logger_wraps(is_stub=True)
    async def delete_zone(self, zone: str) -> None:
        self._get_zone(zone)
        self._zones = {
            name: entries
            for name, entries in self._zones.items()
            if name.casefold() != zone.casefold()
        }

    @logger_wraps(is_stub=True)
    async def create_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> None:
        self._get_zone(zone).setdefault(name, []).append(
            DNSRecordDTO(type=record_type, value=value),
        )

    @logger_wraps(is_stub=True)
    async def delete_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> None:
        entries = self._get_zone(zone)
        records = [
            record
            for record in entries.get(name, [])
            if not record.matches(record_type, value)
        ]
        if records:
            entries[name] = records
        else:
            entries.pop(name, None)

    @logger_wraps(is_stub=True)
    async def update_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        old_value: str,
        new_value: str,
    ) -> None:
        records = self._get_zone(zone).get(name, [])
        for index, record in enumerate(records):
            if record.matches(record_type, old_value):
                records[index] = DNSRecordDTO(
                    type=record_type,
                    value=new_value,
                )
                return
        raise DomainToolPostConditionError(
            "Record was not updated",
            zone=zone,
            name=name,
            type=record_type,
        )

    @logger_wraps(is_stub=True)
    async def list_users(self) -> list[str]:
        return list(self._users)

    @logger_wraps(is_stub=True)
    async def create_user(self, user: DomainUserSpec) -> None:
        if contains_name(list(self._users), user.user_name):
            raise DomainToolPostConditionError(
                "User already exists",
                user=user.user_name,
            )
        self._users[user.user_name] = user.password

    @logger_wraps(is_stub=True)
    async def delete_user(self, user_name: str) -> None:
        self._users.pop(user_name, None)

    @logger_wraps(is_stub=True)
    async def set_password(self, user_name: str, password: str) -> None:
        if user_name not in self._users:
            raise DomainToolPostConditionError(
                "Password was not set",
                user=user_name,
            )
        self._users[user_name] = password

    @logger_wraps(is_stub=True)
    async def list_groups(self) -> list[str]:
        return sorted(self._groups)

    @logger_wraps(is_stub=True)
    async def create_group(self, group_name: str) -> None:
        if contains_name(list(self._groups), group_name):
            raise DomainToolPostConditionError(
                "Group already exists",
                group=group_name,
            )
        self._groups.add(group_name)

    @logger_wraps(is_stub=True)
    async def delete_group(self, group_name: str) -> None:
        self._groups.discard(group_name)
