"""DNS adapter.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from api.base_adapter import BaseAdapter
from domain_controller.dns import DNSBindResult, DNSEntryDTO, DNSZoneDTO
from domain_controller.dns.use_cases import DNSUseCase

from .schema import DNSRecordRequest, DNSRecordUpdateRequest, DNSZoneRequest


class DNSFastAPIAdapter(BaseAdapter[DNSUseCase]):
    """DNS adapter."""

    async def get_zones(self) -> list[DNSZoneDTO]:
        return await self._service.get_zones()

    async def get_reverse_zones(self) -> list[DNSZoneDTO]:
        return await self._service.get_reverse_zones()

    async def get_non_reverse_zones(self) -> list[DNSZoneDTO]:
        return await self._service.get_non_reverse_zones()

    async def create_zone(self, data: DNSZoneRequest) -> None:
        await self._service.create_zone(data.zone_name)

    async def delete_zone(self, data: DNSZoneRequest) -> None:
        await self._service.delete_zone(data.zone_name)

    async def get_records(self, zone: str) -> list[DNSEntryDTO]:
        return await self._service.get_records(zone)

    async def record_exists(self, zone: str, data: DNSRecordRequest) -> bool:
        return await self._service.record_exists(
            zone,
            data.record_name,
            data.record_type,
            data.record_value,
        )

    async def add_record(
        self,
        zone: str,
        data: DNSRecordRequest,
    ) -> DNSBindResult:
        """Create record with its mirror."""
        return await self._service.add_record(
            zone,
            data.record_name,
            data.record_type,
            data.record_value,
        )

    async def update_record(
        self,
        zone: str,
        data: DNSRecordUpdateRequest,
    ) -> None:
        await self._service.update_record(
            zone,
            data.record_name,
            data.record_type,
            data.old_value,
            data.new_value,
        )

    async def delete_record(self, zone: str, data: DNSRecordRequest) -> None:
        await self._service.delete_record(
            zone,
            data.record_name,
            data.record_type,
            data.record_value,
        )
