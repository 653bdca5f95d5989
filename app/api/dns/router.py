"""DNS router.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dishka import FromDishka
from fastapi import status
from fastapi_error_map import rule
from fastapi_error_map.routing import ErrorAwareRouter

import domain_controller.dns.exceptions as dns_exc
import domain_controller.domain_tool.exceptions as tool_exc
from api.error_routing import (
    ERROR_MAP_TYPE,
    DishkaErrorAwareRoute,
    DomainErrorTranslator,
)
from domain_controller.dns import (
    DNSBindResult,
    DNSEntryDTO,
    DNSRecordType,
    DNSZoneDTO,
)
from enums import DomainCodes

from .adapter import DNSFastAPIAdapter
from .schema import DNSRecordRequest, DNSRecordUpdateRequest, DNSZoneRequest

translator = DomainErrorTranslator(DomainCodes.DNS)
tool_translator = DomainErrorTranslator(DomainCodes.DOMAIN_TOOL)


error_map: ERROR_MAP_TYPE = {
    dns_exc.DNSZoneNotFoundError: rule(
        status=status.HTTP_404_NOT_FOUND,
        translator=translator,
    ),
    dns_exc.DNSPreconditionError: rule(
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        translator=translator,
    ),
    tool_exc.DomainToolInvocationError: rule(
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        translator=tool_translator,
    ),
    tool_exc.DomainToolPostConditionError: rule(
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        translator=tool_translator,
    ),
}

dns_router = ErrorAwareRouter(
    prefix="/dns",
    tags=["DNS"],
    route_class=DishkaErrorAwareRoute,
)


@dns_router.get("/zones", error_map=error_map)
async def get_zones(
    adapter: FromDishka[DNSFastAPIAdapter],
) -> list[DNSZoneDTO]:
    """Get all zones, forward zones first."""
    return await adapter.get_zones()


@dns_router.get("/zones/reverse", error_map=error_map)
async def get_reverse_zones(
    adapter: FromDishka[DNSFastAPIAdapter],
) -> list[DNSZoneDTO]:
    """Get reverse lookup zones."""
    return await adapter.get_reverse_zones()


@dns_router.get("/zones/non-reverse", error_map=error_map)
async def get_non_reverse_zones(
    adapter: FromDishka[DNSFastAPIAdapter],
) -> list[DNSZoneDTO]:
    """Get forward lookup zones."""
    return await adapter.get_non_reverse_zones()


@dns_router.post(
    "/zones",
    status_code=status.HTTP_201_CREATED,
    error_map=error_map,
)
async def create_zone(
    data: DNSZoneRequest,
    adapter: FromDishka[DNSFastAPIAdapter],
) -> None:
    """Create DNS zone."""
    await adapter.create_zone(data)


@dns_router.delete("/zones", error_map=error_map)
async def delete_zone(
    data: DNSZoneRequest,
    adapter: FromDishka[DNSFastAPIAdapter],
) -> None:
    """Delete DNS zone."""
    await adapter.delete_zone(data)


@dns_router.get("/records/{zone}", error_map=error_map)
async def get_records(
    zone: str,
    adapter: FromDishka[DNSFastAPIAdapter],
) -> list[DNSEntryDTO]:
    """Get all records of zone."""
    return await adapter.get_records(zone)


@dns_router.get("/records/{zone}/exists", error_map=error_map)
async def record_exists(
    zone: str,
    record_name: str,
    record_type: DNSRecordType,
    record_value: str,
    adapter: FromDishka[DNSFastAPIAdapter],
) -> bool:
    """Check if identical record exists in zone."""
    return await adapter.record_exists(
        zone,
        DNSRecordRequest(
            record_name=record_name,
            record_type=record_type,
            record_value=record_value,
        ),
    )


@dns_router.post(
    "/records/{zone}",
    status_code=status.HTTP_201_CREATED,
    error_map=error_map,
)
async def add_record(
    zone: str,
    data: DNSRecordRequest,
    adapter: FromDishka[DNSFastAPIAdapter],
) -> DNSBindResult:
    """Create record and its reverse or forward counterpart."""
    return await adapter.add_record(zone, data)


@dns_router.patch("/records/{zone}", error_map=error_map)
async def update_record(
    zone: str,
    data: DNSRecordUpdateRequest,
    adapter: FromDishka[DNSFastAPIAdapter],
) -> None:
    """Update DNS record value."""
    await adapter.update_record(zone, data)


@dns_router.delete("/records/{zone}", error_map=error_map)
async def delete_record(
    zone: str,
    data: DNSRecordRequest,
    adapter: FromDishka[DNSFastAPIAdapter],
) -> None:
    """Delete DNS record."""
    await adapter.delete_record(zone, data)
