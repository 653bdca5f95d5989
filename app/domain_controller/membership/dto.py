"""Membership DTO.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class GroupItemDTO:
    """Group list item."""

    distinguished_name: str
    name: str
    description: str | None = None
    created: datetime | None = None
    modified: datetime | None = None


@dataclass
class GroupDTO(GroupItemDTO):
    """Group with members."""

    members: list[str] = field(default_factory=list)


@dataclass
class UserDTO:
    """Domain user.

    ``groups`` is read from the computed back-reference attribute.
    """

    user_name: str
    distinguished_name: str | None = None
    display_name: str | None = None
    email: str | None = None
    mobile: str | None = None
    enabled: bool = True
    groups: list[str] = field(default_factory=list)
    created: datetime | None = None
    modified: datetime | None = None
    last_logon: datetime | None = None
    password_last_set: datetime | None = None
    logon_count: int | None = None


@dataclass
class NewGroupDTO:
    """Group to create."""

    name: str
    members: list[str] = field(default_factory=list)


@dataclass
class NewUserDTO:
    """User to create."""

    user_name: str
    password: str
    display_name: str | None = None
    email: str | None = None
    mobile: str | None = None
    enabled: bool = True
    groups: list[str] = field(default_factory=list)


@dataclass
class UserUpdateDTO:
    """Attributes of an existing user."""

    display_name: str | None = None
    email: str | None = None
    mobile: str | None = None
    enabled: bool = True
    groups: list[str] = field(default_factory=list)
