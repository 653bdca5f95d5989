"""Domain tool package.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import AbstractDomainTool, DomainUserSpec
from .exceptions import (
    DomainToolError,
    DomainToolInvocationError,
    DomainToolPostConditionError,
)
from .executor import CommandExecutor, CommandResponse
from .parser import SambaToolResponseParser
from .samba_tool import SambaTool
from .stub import StubDomainTool

__all__ = [
    "AbstractDomainTool",
    "CommandExecutor",
    "CommandResponse",
    "DomainToolError",
    "DomainToolInvocationError",
    "DomainToolPostConditionError",
    "DomainUserSpec",
    "SambaTool",
    "SambaToolResponseParser",
    "StubDomainTool",
]
