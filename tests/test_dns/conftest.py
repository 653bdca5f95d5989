"""DNS test fixtures.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest
import pytest_asyncio

from config import DNSTopologySettings
from domain_controller.dns.synchronizer import DNSSynchronizer
from domain_controller.dns.use_cases import DNSUseCase
from domain_controller.domain_tool import StubDomainTool
from tests.fakes import FORWARD_ZONE, REVERSE_ZONE_IP4, REVERSE_ZONE_IP6


@pytest_asyncio.fixture
async def zones_tool() -> StubDomainTool:
    """Get domain tool with one forward and two reverse zones."""
    tool = StubDomainTool()
    for zone in (FORWARD_ZONE, REVERSE_ZONE_IP4, REVERSE_ZONE_IP6):
        await tool.create_zone(zone)
    return tool


@pytest.fixture
def synchronizer(
    zones_tool: StubDomainTool,
    topology: DNSTopologySettings,
) -> DNSSynchronizer:
    return DNSSynchronizer(zones_tool, topology)


@pytest.fixture
def dns_use_case(
    zones_tool: StubDomainTool,
    synchronizer: DNSSynchronizer,
    topology: DNSTopologySettings,
) -> DNSUseCase:
    return DNSUseCase(zones_tool, synchronizer, topology)
