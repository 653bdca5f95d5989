"""DNS exceptions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum

from errors import BaseDomainException


class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    DNS_ZONE_NOT_FOUND_ERROR = 1
    DNS_PRECONDITION_ERROR = 2


class DNSError(BaseDomainException):
    """DNS Error."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class DNSZoneNotFoundError(DNSError):
    """DNS zone not found."""

    code = ErrorCodes.DNS_ZONE_NOT_FOUND_ERROR


class DNSPreconditionError(DNSError):
    """Malformed zone arithmetic or name outside of claimed zone."""

    code = ErrorCodes.DNS_PRECONDITION_ERROR
