"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum
from typing import Any


class BaseDomainException(Exception):  # noqa N818
    """Base exception.

    Subclasses must declare an error ``code``. Keyword arguments passed to
    the constructor are kept in ``context`` so callers can tell which
    entry, attribute or command an error belongs to.
    """

    code: IntEnum

    def __init__(self, *args: object, **context: Any) -> None:
        """Store message and error context."""
        super().__init__(*args)
        self.context = context

    def __init_subclass__(cls) -> None:
        """Initialize subclass."""
        super().__init_subclass__()

        if not hasattr(cls, "code"):
            raise AttributeError("code must be set")

    def __str__(self) -> str:
        message = super().__str__()
        if not self.context:
            return message

        details = " ".join(
            f"{key}=[{value}]" for key, value in self.context.items()
        )
        return f"{message} {details}" if message else details
