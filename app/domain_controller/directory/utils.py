"""Directory helpers.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re

from ldap3.utils.conv import escape_filter_chars
from ldap3.utils.dn import escape_rdn, parse_dn
from loguru import logger as loguru_logger

log = loguru_logger.bind(name="directory")

log.add(
    "logs/directory_{time:DD-MM-YYYY}.log",
    filter=lambda rec: rec["extra"].get("name") == "directory",
    retention="10 days",
    rotation="1d",
    colorize=False,
)


def create_dn(rdn: str, value: str, base_dn: str) -> str:
    """Create entry DN from RDN attribute, value and parent DN.

    :param str rdn: RDN attribute name, e.g. ``cn``
    :param str value: unescaped RDN value
    :param str base_dn: parent DN
    :return str: distinguished name
    """
    return f"{rdn}={escape_rdn(value)},{base_dn}"


def format_filter(template: str, value: str) -> str:
    """Substitute escaped value into ``{0}`` placeholder of a filter."""
    return template.format(escape_filter_chars(value))


def is_dn(value: str) -> bool:
    return "=" in value


def get_rdn_value(dn: str) -> str:
    """Get unescaped value of the leftmost RDN."""
    _, value, _ = parse_dn(dn)[0]
    return re.sub(r"\\(.)", r"\1", value)
