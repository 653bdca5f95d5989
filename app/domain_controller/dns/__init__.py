"""DNS package.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .dto import (
    DNSBindResult,
    DNSEntryDTO,
    DNSRecordDTO,
    DNSWriteResult,
    DNSZoneDTO,
)
from .enums import DNSRecordType, DNSWriteOutcome
from .exceptions import DNSError, DNSPreconditionError, DNSZoneNotFoundError

__all__ = [
    "DNSBindResult",
    "DNSEntryDTO",
    "DNSError",
    "DNSPreconditionError",
    "DNSRecordDTO",
    "DNSRecordType",
    "DNSWriteOutcome",
    "DNSWriteResult",
    "DNSZoneDTO",
    "DNSZoneNotFoundError",
]
