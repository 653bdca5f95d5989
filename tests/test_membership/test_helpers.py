"""Tests for directory time conversions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from domain_controller.membership.helpers import (
    dt_to_ft,
    ft_to_dt,
    parse_filetime,
    parse_generalized_time,
    to_generalized_time,
)

_UTC = ZoneInfo("UTC")


def test_filetime_epoch() -> None:
    epoch = datetime(1970, 1, 1, tzinfo=_UTC)
    assert dt_to_ft(epoch) == 116444736000000000
    assert ft_to_dt(116444736000000000) == epoch


def test_filetime_keeps_microseconds() -> None:
    dt = datetime(2024, 5, 17, 10, 30, 15, 123456, tzinfo=_UTC)
    assert ft_to_dt(dt_to_ft(dt)) == dt


@pytest.mark.parametrize(
    "value",
    [None, "", "0", "-1", "9223372036854775807", "never"],
)
def test_parse_filetime_unset(value: str | None) -> None:
    """Test unset, never and malformed values give None."""
    assert parse_filetime(value) is None


def test_parse_filetime() -> None:
    assert parse_filetime("116444736000000000") == datetime(
        1970,
        1,
        1,
        tzinfo=_UTC,
    )


def test_parse_generalized_time() -> None:
    assert parse_generalized_time("20191226154554.0Z") == datetime(
        2019,
        12,
        26,
        15,
        45,
        54,
        tzinfo=_UTC,
    )


@pytest.mark.parametrize("value", [None, "", "2019", "2019122615455x.0Z"])
def test_parse_generalized_time_malformed(value: str | None) -> None:
    assert parse_generalized_time(value) is None


def test_to_generalized_time() -> None:
    dt = datetime(2019, 12, 26, 15, 45, 54, tzinfo=_UTC)
    assert to_generalized_time(dt) == "20191226154554.0Z"
