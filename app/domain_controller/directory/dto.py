"""Directory DTO.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterable, Mapping

from ldap3.utils.ciDict import CaseInsensitiveDict


class ModificationType(StrEnum):
    """Attribute modification operations."""

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"


@dataclass(frozen=True)
class AttributeModification:
    """Single attribute change of a modify request."""

    operation: ModificationType
    attribute: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True, eq=False)
class DirectoryEntry:
    """Snapshot of a directory entry.

    Attribute names are case-insensitive; values are unordered.
    """

    dn: str
    attributes: Mapping[str, frozenset[str]] = field(
        default_factory=CaseInsensitiveDict,
    )

    @classmethod
    def create(
        cls,
        dn: str,
        attributes: Mapping[str, Iterable[str]],
    ) -> "DirectoryEntry":
        """Build entry from raw attribute values."""
        values: CaseInsensitiveDict = CaseInsensitiveDict()
        for name, attr_values in attributes.items():
            values[name] = frozenset(attr_values)
        return cls(dn=dn, attributes=values)

    def get_values(self, attribute: str) -> frozenset[str]:
        return self.attributes.get(attribute, frozenset())

    def get_first(self, attribute: str) -> str | None:
        """Get any single value of attribute, None if absent."""
        values = self.get_values(attribute)
        if not values:
            return None
        return min(values)

    def has_attribute(self, attribute: str) -> bool:
        return bool(self.get_values(attribute))
