"""Tests for in-memory domain tool.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from domain_controller.dns import DNSZoneNotFoundError
from domain_controller.domain_tool import (
    DomainToolPostConditionError,
    DomainUserSpec,
    StubDomainTool,
)


@pytest.mark.asyncio
async def test_zones() -> None:
    tool = StubDomainTool()
    await tool.create_zone("example.org")

    with pytest.raises(DomainToolPostConditionError):
        await tool.create_zone("EXAMPLE.org")

    await tool.delete_zone("Example.ORG")
    assert await tool.list_zones() == []

    with pytest.raises(DNSZoneNotFoundError):
        await tool.delete_zone("example.org")


@pytest.mark.asyncio
async def test_records() -> None:
    """Test duplicate records are kept like the real tool does."""
    tool = StubDomainTool()
    await tool.create_zone("example.org")

    await tool.create_record("example.org", "www", "A", "192.0.2.1")
    await tool.create_record("example.org", "www", "A", "192.0.2.1")
    (entry,) = await tool.list_records("example.org")
    assert len(entry.records) == 2

    await tool.update_record(
        "example.org",
        "www",
        "A",
        "192.0.2.1",
        "192.0.2.2",
    )
    assert entry.has_record("A", "192.0.2.1")
    (entry,) = await tool.list_records("example.org")
    assert entry.has_record("A", "192.0.2.2")

    await tool.delete_record("example.org", "www", "A", "192.0.2.1")
    await tool.delete_record("example.org", "www", "A", "192.0.2.2")
    assert await tool.list_records("example.org") == []

    with pytest.raises(DomainToolPostConditionError):
        await tool.update_record("example.org", "www", "A", "x", "y")


@pytest.mark.asyncio
async def test_accounts() -> None:
    tool = StubDomainTool()
    await tool.create_user(
        DomainUserSpec(user_name="carol", password="a"),  # noqa: S106
    )
    await tool.create_group("ops")

    with pytest.raises(DomainToolPostConditionError):
        await tool.create_user(
            DomainUserSpec(user_name="Carol", password="b"),  # noqa: S106
        )
    with pytest.raises(DomainToolPostConditionError):
        await tool.set_password("nobody", "c")

    await tool.set_password("carol", "d")
    await tool.delete_user("carol")
    await tool.delete_group("ops")

    assert await tool.list_users() == []
    assert await tool.list_groups() == []
