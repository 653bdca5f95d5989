"""Directory exceptions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum

from errors import BaseDomainException


class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    DIRECTORY_CONNECTION_ERROR = 1
    DIRECTORY_OPERATION_ERROR = 2


class DirectoryError(BaseDomainException):
    """Directory error."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class DirectoryConnectionError(DirectoryError):
    """Directory server is unreachable or dropped the connection."""

    code = ErrorCodes.DIRECTORY_CONNECTION_ERROR


class DirectoryOperationError(DirectoryError):
    """Directory server rejected an operation."""

    code = ErrorCodes.DIRECTORY_OPERATION_ERROR
