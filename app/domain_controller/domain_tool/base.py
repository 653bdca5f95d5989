"""Abstract domain tool for privileged domain administration.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from domain_controller.dns.dto import DNSEntryDTO, DNSZoneDTO


@dataclass(frozen=True)
class DomainUserSpec:
    """Attributes passed to the domain tool on user creation."""

    user_name: str
    password: str
    display_name: str | None = None
    email: str | None = None


class AbstractDomainTool(ABC):
    """Abstract domain tool.

    Every call is a separate invocation of the tool. Mutating calls
    confirm their effect by re-querying.
    """

    @abstractmethod
    async def list_zones(self) -> list[DNSZoneDTO]: ...

    @abstractmethod
    async def list_records(self, zone: str) -> list[DNSEntryDTO]: ...

    @abstractmethod
    async def create_zone(self, zone: str) -> None: ...

    @abstractmethod
    async def delete_zone(self, zone: str) -> None: ...

    @abstractmethod
    async def create_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> None: ...

    @abstractmethod
    async def delete_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> None: ...

    @abstractmethod
    async def update_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        old_value: str,
        new_value: str,
    ) -> None: ...

    @abstractmethod
    async def list_users(self) -> list[str]: ...

    @abstractmethod
    async def create_user(self, user: DomainUserSpec) -> None: ...

    @abstractmethod
    async def delete_user(self, user_name: str) -> None: ...

    @abstractmethod
    async def set_password(self, user_name: str, password: str) -> None: ...

    @abstractmethod
    async def list_groups(self) -> list[str]: ...

    @abstractmethod
    async def create_group(self, group_name: str) -> None: ...

    @abstractmethod
    async def delete_group(self, group_name: str) -> None: ...


def contains_name(names: list[str], name: str) -> bool:
    """Check name presence, account and zone names ignore case."""
    folded = name.casefold()
    return any(item.casefold() == folded for item in names)


def contains_record(
    entries: list[DNSEntryDTO],
    name: str,
    record_type: str,
    value: str,
) -> bool:
    return any(
        entry.name.casefold() == name.casefold()
        and entry.has_record(record_type, value)
        for entry in entries
    )
