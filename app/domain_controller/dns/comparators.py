"""Topology-aware ordering of zones and records.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re
from functools import cmp_to_key
from typing import Any, Callable

from config import DNSTopologySettings

from .classifier import is_reverse_zone

_INT_RE = re.compile(r"[+-]?\d+")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _parse_int(value: str) -> int | None:
    if _INT_RE.fullmatch(value):
        return int(value)
    return None


def _compare_text(first: str, second: str) -> int:
    first_folded, second_folded = first.casefold(), second.casefold()
    if first_folded < second_folded:
        return -1
    if first_folded > second_folded:
        return 1
    return 0


def compare_labels(first: str, second: str) -> int:
    """Compare numerically when both parse as integers, else as text."""
    first_int, second_int = _parse_int(first), _parse_int(second)
    if first_int is not None and second_int is not None:
        return _sign(first_int - second_int)
    return _compare_text(first, second)


def compare_zone_names(
    first: str,
    second: str,
    topology: DNSTopologySettings,
) -> int:
    """Compare zone names.

    Forward zones go first in case-insensitive order. Reverse zones
    with more labels (more specific networks) go before shorter ones,
    equal length zones compare label by label from the rightmost.
    """
    first_reverse = is_reverse_zone(first, topology)
    second_reverse = is_reverse_zone(second, topology)

    if first_reverse != second_reverse:
        return 1 if first_reverse else -1

    if not first_reverse:
        return _compare_text(first, second)

    first_labels, second_labels = first.split("."), second.split(".")
    result = _sign(len(second_labels) - len(first_labels))
    if result:
        return result

    for first_label, second_label in zip(
        reversed(first_labels),
        reversed(second_labels),
    ):
        result = compare_labels(first_label, second_label)
        if result:
            return result
    return 0


def compare_record_names(first: str, second: str) -> int:
    """Compare record names, numeric labels by value."""
    return compare_labels(first, second)


def zone_sort_key(
    topology: DNSTopologySettings,
    name: Callable[[Any], str] = lambda zone: zone,
) -> Callable[[Any], Any]:
    """Get sort key for zones.

    :param DNSTopologySettings topology: topology
    :param Callable name: zone name getter, identity by default
    """
    return cmp_to_key(
        lambda first, second: compare_zone_names(
            name(first),
            name(second),
            topology,
        ),
    )


def record_sort_key(
    name: Callable[[Any], str] = lambda record: record,
) -> Callable[[Any], Any]:
    return cmp_to_key(
        lambda first, second: compare_record_names(name(first), name(second)),
    )
