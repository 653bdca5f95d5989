"""API module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .dns.router import dns_router
from .groups.router import groups_router
from .users.router import users_router

__all__ = [
    "dns_router",
    "groups_router",
    "users_router",
]
