"""Directory entry to DTO mapping.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from domain_controller.directory import DirectoryEntry, get_rdn_value

from .dto import GroupDTO, GroupItemDTO, UserDTO
from .helpers import parse_filetime, parse_generalized_time
from .user_account_control import is_account_enabled


def _get_name(entry: DirectoryEntry) -> str:
    return entry.get_first("sAMAccountName") or get_rdn_value(entry.dn)


def _sorted_casefold(values: frozenset[str]) -> list[str]:
    return sorted(values, key=str.casefold)


def map_group_item(entry: DirectoryEntry) -> GroupItemDTO:
    return GroupItemDTO(
        distinguished_name=entry.dn,
        name=_get_name(entry),
        description=entry.get_first("description"),
        created=parse_generalized_time(entry.get_first("whenCreated")),
        modified=parse_generalized_time(entry.get_first("whenChanged")),
    )


def map_group(entry: DirectoryEntry, member_attribute: str) -> GroupDTO:
    item = map_group_item(entry)
    return GroupDTO(
        distinguished_name=item.distinguished_name,
        name=item.name,
        description=item.description,
        created=item.created,
        modified=item.modified,
        members=_sorted_casefold(entry.get_values(member_attribute)),
    )


def map_user(entry: DirectoryEntry, group_attribute: str) -> UserDTO:
    """Map user entry, group DNs are taken from back-reference."""
    logon_count = entry.get_first("logonCount")
    return UserDTO(
        user_name=_get_name(entry),
        distinguished_name=entry.dn,
        display_name=entry.get_first("displayName"),
        email=entry.get_first("mail"),
        mobile=entry.get_first("telephoneNumber"),
        enabled=is_account_enabled(entry.get_first("userAccountControl")),
        groups=_sorted_casefold(entry.get_values(group_attribute)),
        created=parse_generalized_time(entry.get_first("whenCreated")),
        modified=parse_generalized_time(entry.get_first("whenChanged")),
        last_logon=parse_filetime(entry.get_first("lastLogon")),
        password_last_set=parse_filetime(entry.get_first("pwdLastSet")),
        logon_count=(
            int(logon_count)
            if logon_count and logon_count.isdigit()
            else None
        ),
    )
