"""Domain tool exceptions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum

from errors import BaseDomainException


class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    DOMAIN_TOOL_INVOCATION_ERROR = 1
    DOMAIN_TOOL_POST_CONDITION_ERROR = 2


class DomainToolError(BaseDomainException):
    """Domain tool error."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class DomainToolInvocationError(DomainToolError):
    """Domain tool process could not be run or reported failure."""

    code = ErrorCodes.DOMAIN_TOOL_INVOCATION_ERROR


class DomainToolPostConditionError(DomainToolError):
    """Re-query after a domain tool call did not confirm its effect."""

    code = ErrorCodes.DOMAIN_TOOL_POST_CONDITION_ERROR
