"""DNS use cases.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from config import DNSTopologySettings
from domain_controller.domain_tool import AbstractDomainTool

from .classifier import is_excluded_record, is_excluded_zone, is_reverse_zone
from .comparators import record_sort_key, zone_sort_key
from .dto import DNSBindResult, DNSEntryDTO, DNSZoneDTO
from .exceptions import DNSZoneNotFoundError
from .synchronizer import DNSSynchronizer


class DNSUseCase:
    """DNS use case."""

    def __init__(
        self,
        domain_tool: AbstractDomainTool,
        synchronizer: DNSSynchronizer,
        topology: DNSTopologySettings,
    ) -> None:
        """Initialize DNS use case."""
        self._domain_tool = domain_tool
        self._synchronizer = synchronizer
        self._topology = topology

    def _sorted_zones(self, zones: list[DNSZoneDTO]) -> list[DNSZoneDTO]:
        return sorted(
            zones,
            key=zone_sort_key(self._topology, lambda zone: zone.name),
        )

    async def get_zones(self) -> list[DNSZoneDTO]:
        """Get all not excluded zones."""
        zones = await self._domain_tool.list_zones()
        return self._sorted_zones(
            [
                zone
                for zone in zones
                if not is_excluded_zone(zone.name, self._topology)
            ],
        )

    async def get_reverse_zones(self) -> list[DNSZoneDTO]:
        """Get reverse lookup zones."""
        return [
            zone
            for zone in await self.get_zones()
            if is_reverse_zone(zone.name, self._topology)
        ]

    async def get_non_reverse_zones(self) -> list[DNSZoneDTO]:
        """Get forward lookup zones."""
        return [
            zone
            for zone in await self.get_zones()
            if not is_reverse_zone(zone.name, self._topology)
        ]

    async def get_records(self, zone: str) -> list[DNSEntryDTO]:
        """Get not excluded entries of zone.

        :raises DNSZoneNotFoundError: zone is absent or excluded
        """
        zones = await self.get_zones()
        if not any(item.name.casefold() == zone.casefold() for item in zones):
            raise DNSZoneNotFoundError("Zone not found", zone=zone)

        entries = await self._domain_tool.list_records(zone)
        return sorted(
            (
                entry
                for entry in entries
                if not is_excluded_record(entry.name, self._topology)
            ),
            key=record_sort_key(lambda entry: entry.name),
        )

    async def create_zone(self, zone: str) -> None:
        """Create DNS zone."""
        await self._domain_tool.create_zone(zone)

    async def delete_zone(self, zone: str) -> None:
        """Delete DNS zone."""
        await self._domain_tool.delete_zone(zone)

    async def record_exists(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> bool:
        return await self._synchronizer.record_exists(
            zone,
            name,
            record_type.upper(),
            value,
        )

    async def add_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> DNSBindResult:
        """Create record together with its reverse or forward mirror."""
        return await self._synchronizer.add_record(
            zone,
            name,
            record_type,
            value,
        )

    async def delete_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> None:
        """Delete DNS record."""
        await self._synchronizer.delete_record(zone, name, record_type, value)

    async def update_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        old_value: str,
        new_value: str,
    ) -> None:
        """Update DNS record value."""
        await self._synchronizer.update_record(
            zone,
            name,
            record_type,
            old_value,
            new_value,
        )
