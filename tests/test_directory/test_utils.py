"""Tests for directory helpers.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from domain_controller.directory import (
    DirectoryEntry,
    create_dn,
    format_filter,
    get_rdn_value,
    is_dn,
)


def test_create_dn_escapes_value() -> None:
    assert create_dn("cn", "bob", "dc=x") == "cn=bob,dc=x"
    assert create_dn("cn", "Doe, John", "dc=x") == "cn=Doe\\, John,dc=x"


def test_format_filter_escapes_value() -> None:
    template = "(&(objectClass=user)(sAMAccountName={0}))"

    assert format_filter(template, "bob") == (
        "(&(objectClass=user)(sAMAccountName=bob))"
    )
    assert format_filter(template, "*)(x=1") == (
        "(&(objectClass=user)(sAMAccountName=\\2a\\29\\28x=1))"
    )


@pytest.mark.parametrize(
    ("value", "result"),
    [("cn=bob,dc=x", True), ("bob", False)],
)
def test_is_dn(value: str, result: bool) -> None:
    assert is_dn(value) is result


def test_get_rdn_value() -> None:
    assert get_rdn_value("cn=bob,dc=x") == "bob"
    assert get_rdn_value("cn=Doe\\, John,dc=x") == "Doe, John"


def test_entry_attributes_ignore_case() -> None:
    entry = DirectoryEntry.create(
        "cn=bob,dc=x",
        {"memberOf": ["cn=b,dc=x", "cn=a,dc=x"], "mail": []},
    )

    assert entry.get_values("MEMBEROF") == {"cn=a,dc=x", "cn=b,dc=x"}
    assert entry.get_first("memberof") == "cn=a,dc=x"
    assert entry.get_first("mail") is None
    assert not entry.has_attribute("mail")
    assert not entry.has_attribute("telephoneNumber")
