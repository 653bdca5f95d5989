"""Directory time conversions.

Windows filetime reference:
License: https://github.com/jleclanche/winfiletime/blob/master/LICENSE

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from calendar import timegm
from datetime import datetime
from zoneinfo import ZoneInfo

_EPOCH_AS_FILETIME = 116444736000000000  # January 1, 1970 as MS file time
_HUNDREDS_OF_NS = 10000000
_NEVER = 0x7FFFFFFFFFFFFFFF

_GENERALIZED_TIME_FORMAT = "%Y%m%d%H%M%S"


def dt_to_ft(dt: datetime) -> int:
    """Convert a datetime to a Windows filetime.

    If the object is time zone-naive, it is forced to UTC before conversion.
    """
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) != 0:
        dt = dt.astimezone(ZoneInfo("UTC"))

    filetime = _EPOCH_AS_FILETIME + (timegm(dt.timetuple()) * _HUNDREDS_OF_NS)
    return filetime + (dt.microsecond * 10)


def ft_to_dt(filetime: int) -> datetime:
    """Convert a Windows filetime number to a UTC datetime."""
    s, ns100 = divmod(filetime - _EPOCH_AS_FILETIME, _HUNDREDS_OF_NS)
    return datetime.fromtimestamp(
        s,
        tz=ZoneInfo("UTC"),
    ).replace(microsecond=(ns100 // 10))


def parse_filetime(value: str | None) -> datetime | None:
    """Decode filetime attribute, None for unset and never values."""
    if not value:
        return None
    try:
        filetime = int(value)
    except ValueError:
        return None

    if filetime <= 0 or filetime >= _NEVER:
        return None
    return ft_to_dt(filetime)


def parse_generalized_time(value: str | None) -> datetime | None:
    """Decode LDAP generalized time, e.g. ``20191226154554.0Z``.

    Fraction and zone designator are ignored, the value is taken as UTC.
    """
    if not value or len(value) < 14:
        return None
    try:
        dt = datetime.strptime(value[:14], _GENERALIZED_TIME_FORMAT)
    except ValueError:
        return None
    return dt.replace(tzinfo=ZoneInfo("UTC"))


def to_generalized_time(dt: datetime) -> str:
    """Encode datetime as LDAP generalized time in UTC."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(ZoneInfo("UTC"))
    return dt.strftime(_GENERALIZED_TIME_FORMAT) + ".0Z"
