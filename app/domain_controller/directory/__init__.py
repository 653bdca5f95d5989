"""Directory client package.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .client import DirectoryClient, DirectoryConnection
from .dto import AttributeModification, DirectoryEntry, ModificationType
from .exceptions import (
    DirectoryConnectionError,
    DirectoryError,
    DirectoryOperationError,
)
from .utils import create_dn, format_filter, get_rdn_value, is_dn

__all__ = [
    "AttributeModification",
    "DirectoryClient",
    "DirectoryConnection",
    "DirectoryConnectionError",
    "DirectoryEntry",
    "DirectoryError",
    "DirectoryOperationError",
    "ModificationType",
    "create_dn",
    "format_filter",
    "get_rdn_value",
    "is_dn",
]
