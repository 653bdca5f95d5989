"""Tests for DNS record matching.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from domain_controller.dns.dto import (
    DNSEntryDTO,
    DNSRecordDTO,
    same_record_value,
)


@pytest.mark.parametrize(
    ("record_type", "first", "second", "expected"),
    [
        ("A", "192.168.1.20", " 192.168.1.20", True),
        ("A", "192.168.1.20", "192.168.1.21", False),
        ("AAAA", "2001:db8::1", "2001:DB8:0::1", True),
        ("aaaa", "2001:db8::1", "2001:0db8:0000::0001", True),
        ("AAAA", "2001:db8::1", "2001:db8::2", False),
        ("A", "not-an-ip", "not-an-ip", True),
        ("PTR", "host.example.org", "host.example.org", True),
        ("PTR", "host.example.org", " host.example.org", False),
    ],
)
def test_same_record_value(
    record_type: str,
    first: str,
    second: str,
    expected: bool,
) -> None:
    assert same_record_value(record_type, first, second) is expected


def test_entry_has_record() -> None:
    entry = DNSEntryDTO(
        name="h6",
        records=[DNSRecordDTO(type="AAAA", value="2001:db8::1")],
    )

    assert entry.has_record("aaaa", "2001:DB8::1")
    assert not entry.has_record("A", "2001:db8::1")
