"""User router.

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
from api.groups.schema import NamesRequest
from domain_controller.membership import UserDTO
from enums import DomainCodes

from .adapter import UserFastAPIAdapter
from .schema import PasswordRequest, UserCreateRequest, UserUpdateRequest

translator = DomainErrorTranslator(DomainCodes.MEMBERSHIP)
directory_translator = DomainErrorTranslator(DomainCodes.DIRECTORY)
tool_translator = DomainErrorTranslator(DomainCodes.DOMAIN_TOOL)


error_map: ERROR_MAP_TYPE = {
    membership_exc.UserNotFoundError: rule(
        status=status.HTTP_404_NOT_FOUND,
        translator=translator,
    ),
    membership_exc.UserAlreadyExistsError: rule(
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

users_router = ErrorAwareRouter(
    prefix="/users",
    tags=["Users"],
    route_class=DishkaErrorAwareRoute,
)


@users_router.get("", error_map=error_map)
async def get_users(
    adapter: FromDishka[UserFastAPIAdapter],
) -> list[UserDTO]:
    """Get all users."""
    return await adapter.get_users()


@users_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    error_map=error_map,
)
async def add_user(
    data: UserCreateRequest,
    adapter: FromDishka[UserFastAPIAdapter],
) -> UserDTO:
    """Create user."""
    return await adapter.add_user(data)


@users_router.get("/{name}", error_map=error_map)
async def get_user(
    name: str,
    adapter: FromDishka[UserFastAPIAdapter],
) -> UserDTO:
    """Get user."""
    return await adapter.get_user(name)


@users_router.get("/{name}/exists", error_map=error_map)
async def user_exists(
    name: str,
    adapter: FromDishka[UserFastAPIAdapter],
) -> bool:
    """Check if user exists."""
    return await adapter.user_exists(name)


@users_router.put("/{name}", error_map=error_map)
async def update_user(
    name: str,
    data: UserUpdateRequest,
    adapter: FromDishka[UserFastAPIAdapter],
    update_groups: bool = True,
) -> UserDTO:
    """Update user attributes and, unless disabled, groups."""
    return await adapter.update_user(name, data, update_groups)


@users_router.put("/{name}/groups", error_map=error_map)
async def update_user_groups(
    name: str,
    data: NamesRequest,
    adapter: FromDishka[UserFastAPIAdapter],
) -> UserDTO:
    """Replace groups of user."""
    return await adapter.update_user_groups(name, data)


@users_router.put(
    "/{name}/password",
    status_code=status.HTTP_204_NO_CONTENT,
    error_map=error_map,
)
async def update_user_password(
    name: str,
    data: PasswordRequest,
    adapter: FromDishka[UserFastAPIAdapter],
) -> None:
    """Set new user password."""
    await adapter.update_user_password(name, data)


@users_router.delete("/{name}", error_map=error_map)
async def delete_user(
    name: str,
    adapter: FromDishka[UserFastAPIAdapter],
) -> None:
    """Delete user."""
    await adapter.delete_user(name)
