"""Membership package.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .dto import (
    GroupDTO,
    GroupItemDTO,
    NewGroupDTO,
    NewUserDTO,
    UserDTO,
    UserUpdateDTO,
)
from .exceptions import (
    GroupAlreadyExistsError,
    GroupNotFoundError,
    MembershipError,
    MembershipUpdateError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .reconciler import (
    MembershipDelta,
    MembershipReconciler,
    build_member_modifications,
    reconcile,
)
from .use_cases import GroupUseCase, UserUseCase

__all__ = [
    "GroupAlreadyExistsError",
    "GroupDTO",
    "GroupItemDTO",
    "GroupNotFoundError",
    "GroupUseCase",
    "MembershipDelta",
    "MembershipError",
    "MembershipReconciler",
    "MembershipUpdateError",
    "NewGroupDTO",
    "NewUserDTO",
    "UserAlreadyExistsError",
    "UserDTO",
    "UserNotFoundError",
    "UserUpdateDTO",
    "UserUseCase",
    "build_member_modifications",
    "reconcile",
]
