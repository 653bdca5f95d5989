"""Membership exceptions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum

from errors import BaseDomainException


class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    GROUP_NOT_FOUND_ERROR = 1
    USER_NOT_FOUND_ERROR = 2
    GROUP_ALREADY_EXISTS_ERROR = 3
    USER_ALREADY_EXISTS_ERROR = 4
    MEMBERSHIP_UPDATE_ERROR = 5


class MembershipError(BaseDomainException):
    """Membership error."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class GroupNotFoundError(MembershipError):
    """Group not found."""

    code = ErrorCodes.GROUP_NOT_FOUND_ERROR


class UserNotFoundError(MembershipError):
    """User not found."""

    code = ErrorCodes.USER_NOT_FOUND_ERROR


class GroupAlreadyExistsError(MembershipError):
    """Group already exists."""

    code = ErrorCodes.GROUP_ALREADY_EXISTS_ERROR


class UserAlreadyExistsError(MembershipError):
    """User already exists."""

    code = ErrorCodes.USER_ALREADY_EXISTS_ERROR


class MembershipUpdateError(MembershipError):
    """Modify of a membership attribute failed."""

    code = ErrorCodes.MEMBERSHIP_UPDATE_ERROR
