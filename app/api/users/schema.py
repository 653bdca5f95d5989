"""User schemas.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pydantic import BaseModel, Field, SecretStr


class UserUpdateRequest(BaseModel):
    """User attributes.

    Groups are group names or group DNs.
    """

    display_name: str | None = None
    email: str | None = None
    mobile: str | None = None
    enabled: bool = True
    groups: list[str] = Field(default_factory=list)


class UserCreateRequest(UserUpdateRequest):
    """New user."""

    user_name: str = Field(min_length=1)
    password: SecretStr = Field(min_length=1)


class PasswordRequest(BaseModel):
    """New password."""

    value: SecretStr = Field(min_length=1)
