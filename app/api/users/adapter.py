"""User adapter.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from api.base_adapter import BaseAdapter
from api.groups.schema import NamesRequest
from domain_controller.membership import (
    NewUserDTO,
    UserDTO,
    UserUpdateDTO,
    UserUseCase,
)

from .schema import PasswordRequest, UserCreateRequest, UserUpdateRequest


def _to_update_dto(data: UserUpdateRequest) -> UserUpdateDTO:
    return UserUpdateDTO(
        display_name=data.display_name,
        email=data.email,
        mobile=data.mobile,
        enabled=data.enabled,
        groups=data.groups,
    )


class UserFastAPIAdapter(BaseAdapter[UserUseCase]):
    """User adapter."""

    async def get_users(self) -> list[UserDTO]:
        return await self._service.get_users()

    async def user_exists(self, name: str) -> bool:
        return await self._service.user_exists(name)

    async def get_user(self, name: str) -> UserDTO:
        return await self._service.get_user(name)

    async def add_user(self, data: UserCreateRequest) -> UserDTO:
        """Create user with attributes and groups."""
        return await self._service.add_user(
            NewUserDTO(
                user_name=data.user_name,
                password=data.password.get_secret_value(),
                display_name=data.display_name,
                email=data.email,
                mobile=data.mobile,
                enabled=data.enabled,
                groups=data.groups,
            ),
        )

    async def update_user(
        self,
        name: str,
        data: UserUpdateRequest,
        update_groups: bool,
    ) -> UserDTO:
        return await self._service.update_user(
            name,
            _to_update_dto(data),
            update_groups=update_groups,
        )

    async def update_user_groups(
        self,
        name: str,
        data: NamesRequest,
    ) -> UserDTO:
        return await self._service.update_user_groups(name, data.values)

    async def update_user_password(
        self,
        name: str,
        data: PasswordRequest,
    ) -> None:
        await self._service.update_user_password(
            name,
            data.value.get_secret_value(),
        )

    async def delete_user(self, name: str) -> None:
        await self._service.delete_user(name)
