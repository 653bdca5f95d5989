"""Enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, StrEnum


class DomainCodes(IntEnum):
    """Error code parts."""

    GENERAL = 1
    DIRECTORY = 2
    MEMBERSHIP = 3
    DNS = 4
    DOMAIN_TOOL = 5


class SearchScope(StrEnum):
    """Directory search scopes."""

    BASE = "base"
    ONELEVEL = "onelevel"
    SUBTREE = "subtree"


class DomainToolKind(StrEnum):
    """Domain tool implementations."""

    SAMBA = "samba"
    STUB = "stub"
