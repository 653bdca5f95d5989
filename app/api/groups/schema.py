"""Group schemas.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pydantic import BaseModel, Field


class NamesRequest(BaseModel):
    """Names or distinguished names."""

    values: list[str] = Field(default_factory=list)


class GroupCreateRequest(BaseModel):
    """New group.

    Members are user names or user DNs.
    """

    name: str = Field(min_length=1)
    members: list[str] = Field(default_factory=list)
