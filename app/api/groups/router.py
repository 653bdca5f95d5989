"""Group router.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dishka import FromDishka
from fastapi import status
from fastapi_error_map import rule
from fastapi_error_map.routing import ErrorAwareRouter

import domain_controller.directory.exceptions as directory_exc
import domain_controller.domain_tool.exceptions as tool_exc
import domain_controller.membership.exceptions as membership_exc
from api.error_routing import (
    ERROR_MAP_TYPE,
    DishkaErrorAwareRoute,
    DomainErrorTranslator,
)
from domain_controller.membership import GroupDTO, GroupItemDTO
from enums import DomainCodes

from .adapter import GroupFastAPIAdapter
from .schema import GroupCreateRequest, NamesRequest

translator = DomainErrorTranslator(DomainCodes.MEMBERSHIP)
directory_translator = DomainErrorTranslator(DomainCodes.DIRECTORY)
tool_translator = DomainErrorTranslator(DomainCodes.DOMAIN_TOOL)


error_map: ERROR_MAP_TYPE = {
    membership_exc.GroupNotFoundError: rule(
        status=status.HTTP_404_NOT_FOUND,
        translator=translator,
    ),
    membership_exc.GroupAlreadyExistsError: rule(
        status=status.HTTP_409_CONFLICT,
        translator=translator,
    ),
    membership_exc.MembershipUpdateError: rule(
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        translator=translator,
    ),
    directory_exc.DirectoryConnectionError: rule(
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        translator=directory_translator,
    ),
    directory_exc.DirectoryOperationError: rule(
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        translator=directory_translator,
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

groups_router = ErrorAwareRouter(
    prefix="/groups",
    tags=["Groups"],
    route_class=DishkaErrorAwareRoute,
)


@groups_router.get("", error_map=error_map)
async def get_groups(
    adapter: FromDishka[GroupFastAPIAdapter],
    query: str | None = None,
) -> list[GroupItemDTO]:
    """Get groups, optionally filtered by a search query."""
    return await adapter.get_groups(query)


@groups_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    error_map=error_map,
)
async def add_group(
    data: GroupCreateRequest,
    adapter: FromDishka[GroupFastAPIAdapter],
) -> GroupDTO:
    """Create group."""
    return await adapter.add_group(data)


@groups_router.get("/{name}", error_map=error_map)
async def get_group(
    name: str,
    adapter: FromDishka[GroupFastAPIAdapter],
) -> GroupDTO:
    """Get group with members."""
    return await adapter.get_group(name)


@groups_router.put("/{name}/members", error_map=error_map)
async def update_group_members(
    name: str,
    data: NamesRequest,
    adapter: FromDishka[GroupFastAPIAdapter],
) -> GroupDTO:
    """Replace group members."""
    return await adapter.update_group_members(name, data)


@groups_router.delete("/{name}", error_map=error_map)
async def delete_group(
    name: str,
    adapter: FromDishka[GroupFastAPIAdapter],
) -> None:
    """Delete group."""
    await adapter.delete_group(name)
