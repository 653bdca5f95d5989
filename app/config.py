"""Module with settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import json
import os
import re
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, Field, IPvAnyAddress, field_validator

from enums import DomainToolKind, SearchScope

_PYPROJECT_PATH = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _get_vendor_version() -> str:
    with open(_PYPROJECT_PATH, "rb") as f:
        return tomllib.load(f)["project"]["version"]


class Settings(BaseModel):
    """Domain controller connector settings."""

    DEBUG: bool = False
    HOST: IPvAnyAddress = "0.0.0.0"  # type: ignore  # noqa
    HTTP_PORT: int = 8000

    VENDOR_NAME: ClassVar[str] = "MultiFactor"
    VENDOR_VERSION: str = Field(
        default_factory=_get_vendor_version,
        alias="VERSION",
    )

    LDAP_URI: str = "ldap://localhost:389"
    LDAP_BIND_DN: str
    LDAP_BIND_PASSWORD: str
    LDAP_CONNECT_TIMEOUT: int = 10

    GROUP_BASE_DN: str
    GROUP_RDN: str = "cn"
    GROUP_MEMBER_ATTR: str = "member"
    GROUP_FIND_ALL_FILTER: str = "(objectClass=group)"
    GROUP_FIND_ALL_SEARCH_SCOPE: SearchScope = SearchScope.ONELEVEL
    GROUP_FIND_ONE_FILTER: str = "(&(objectClass=group)(sAMAccountName={0}))"
    GROUP_FIND_ONE_SEARCH_SCOPE: SearchScope = SearchScope.ONELEVEL

    USER_BASE_DN: str
    USER_RDN: str = "cn"
    USER_GROUP_ATTR: str = "memberOf"
    USER_FIND_ALL_FILTER: str = "(objectClass=user)"
    USER_FIND_ALL_SEARCH_SCOPE: SearchScope = SearchScope.ONELEVEL
    USER_FIND_ONE_FILTER: str = "(&(objectClass=user)(sAMAccountName={0}))"
    USER_FIND_ONE_SEARCH_SCOPE: SearchScope = SearchScope.ONELEVEL

    DOMAIN_TOOL_KIND: DomainToolKind = DomainToolKind.SAMBA
    KINIT_BINARY: str = "/usr/bin/kinit"
    KINIT_ADMINISTRATOR_NAME: str = "Administrator"
    KINIT_PASSWORD_FILE: str = "/var/lib/dc-con/dc-pass.txt"
    SUDO_BINARY: str = "/usr/bin/sudo"
    USING_SUDO: bool = True
    SAMBA_TOOL_BINARY: str = "/usr/bin/samba-tool"
    SAMBA_TOOL_EXEC_DIR: str = "/tmp"  # noqa: S108
    LOGIN_SHELL: str = "/bin/bash"
    HOME_DIRECTORY_TEMPLATE: str = "\\\\data\\users\\{}"
    UNIX_HOME_DIR_TEMPLATE: str = "/home/{}"
    NAME_SERVER_HOST: str = "ns.example.org"

    REVERSE_ZONE_SUFFIX_IP4: str = ".in-addr.arpa"
    REVERSE_ZONE_SUFFIX_IP6: str = ".ip6.arpa"
    EXCLUDED_ZONE_REGEX_LIST: list[str] = [r"^_msdcs\..*$"]
    EXCLUDED_NODE_REGEX_LIST: list[str] = [
        r"^$",
        r"_msdcs",
        r"_sites",
        r"_tcp",
        r"_udp",
        r"@",
        r"_gc\..*$",
        r"_kerberos\..*$",
        r"_kpasswd\..*$",
        r"_ldap\..*$",
        r"ForestDnsZones",
    ]

    @field_validator(
        "EXCLUDED_ZONE_REGEX_LIST",
        "EXCLUDED_NODE_REGEX_LIST",
        mode="before",
    )
    def load_regex_list(  # noqa: N805
        cls,
        value: str | list[str],
    ) -> list[str]:
        """Get pattern list from a JSON array string."""
        if not isinstance(value, str):
            return value

        try:
            patterns = json.loads(value)
        except json.JSONDecodeError as err:
            raise ValueError(f"Expected JSON array: {err}") from err

        if not isinstance(patterns, list):
            raise ValueError("Expected JSON array of patterns")
        return patterns

    @field_validator("EXCLUDED_ZONE_REGEX_LIST", "EXCLUDED_NODE_REGEX_LIST")
    def check_regex_list(cls, value: list[str]) -> list[str]:  # noqa: N805
        """Validate every exclusion pattern compiles."""
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as err:
                raise ValueError(
                    f"Invalid pattern {pattern!r}: {err}",
                ) from err
        return value

    @field_validator("REVERSE_ZONE_SUFFIX_IP4", "REVERSE_ZONE_SUFFIX_IP6")
    def check_reverse_suffix(cls, value: str) -> str:  # noqa: N805
        """Reverse zone suffix must start with a dot."""
        if not value.startswith("."):
            raise ValueError("Reverse zone suffix must start with '.'")
        return value

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)


@dataclass(frozen=True)
class DNSTopologySettings:
    """Immutable DNS topology configuration.

    Built once at startup and passed explicitly into classifier,
    matcher and comparator calls.
    """

    reverse_zone_suffix_ip4: str = ".in-addr.arpa"
    reverse_zone_suffix_ip6: str = ".ip6.arpa"
    excluded_zone_patterns: tuple[re.Pattern[str], ...] = ()
    excluded_record_patterns: tuple[re.Pattern[str], ...] = ()

    @classmethod
    def from_settings(cls, settings: Settings) -> "DNSTopologySettings":
        """Compile topology from settings."""
        return cls(
            reverse_zone_suffix_ip4=settings.REVERSE_ZONE_SUFFIX_IP4,
            reverse_zone_suffix_ip6=settings.REVERSE_ZONE_SUFFIX_IP6,
            excluded_zone_patterns=tuple(
                re.compile(pattern)
                for pattern in settings.EXCLUDED_ZONE_REGEX_LIST
            ),
            excluded_record_patterns=tuple(
                re.compile(pattern)
                for pattern in settings.EXCLUDED_NODE_REGEX_LIST
            ),
        )

    @property
    def reverse_zone_suffixes(self) -> tuple[str, ...]:
        """Reverse zone suffixes in matching order."""
        return (self.reverse_zone_suffix_ip4, self.reverse_zone_suffix_ip6)
