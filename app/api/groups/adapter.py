"""Group adapter.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from api.base_adapter import BaseAdapter
from domain_controller.membership import (
    GroupDTO,
    GroupItemDTO,
    GroupUseCase,
    NewGroupDTO,
)

from .schema import GroupCreateRequest, NamesRequest


class GroupFastAPIAdapter(BaseAdapter[GroupUseCase]):
    """Group adapter."""

    async def get_groups(self, query: str | None) -> list[GroupItemDTO]:
        return await self._service.get_groups(query)

    async def get_group(self, name: str) -> GroupDTO:
        return await self._service.get_group(name)

    async def add_group(self, data: GroupCreateRequest) -> GroupDTO:
        """Create group with members."""
        return await self._service.add_group(
            NewGroupDTO(name=data.name, members=data.members),
        )

    async def update_group_members(
        self,
        name: str,
        data: NamesRequest,
    ) -> GroupDTO:
        return await self._service.update_group_members(name, data.values)

    async def delete_group(self, name: str) -> None:
        await self._service.delete_group(name)
