"""DNS schemas.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pydantic import BaseModel, Field

from domain_controller.dns import DNSRecordType


class DNSZoneRequest(BaseModel):
    """Zone name."""

    zone_name: str = Field(min_length=1)


class DNSRecordRequest(BaseModel):
    """Single record of a zone."""

    record_name: str = Field(min_length=1)
    record_type: DNSRecordType
    record_value: str = Field(min_length=1)


class DNSRecordUpdateRequest(BaseModel):
    """Record value change."""

    record_name: str = Field(min_length=1)
    record_type: DNSRecordType
    old_value: str = Field(min_length=1)
    new_value: str = Field(min_length=1)
