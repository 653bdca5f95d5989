"""userAccountControl attribute handling.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntFlag


class UserAccountControlFlag(IntFlag):
    """userAccountControl flags used by the connector.

    ACCOUNTDISABLE (0x0002): The account is disabled.
    NORMAL_ACCOUNT (0x0200): A typical user account (default).
    DONT_EXPIRE_PASSWORD (0x10000): The password never expires.
    """

    ACCOUNTDISABLE = 0x0002
    NORMAL_ACCOUNT = 0x0200
    DONT_EXPIRE_PASSWORD = 0x10000


def parse_user_account_control(value: str | None) -> int:
    """Get integer value, 0 when absent or malformed."""
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


def is_account_enabled(value: str | None) -> bool:
    uac = parse_user_account_control(value)
    return not uac & UserAccountControlFlag.ACCOUNTDISABLE


def update_user_account_control(current: int, enabled: bool) -> int:
    """Get userAccountControl with connector defaults applied.

    Normal account and password-never-expires flags are always set,
    account disable flag follows ``enabled``. Other flags are kept.

    :param int current: current userAccountControl value
    :param bool enabled: account should be enabled
    :return int: new value
    """
    value = (
        current
        | UserAccountControlFlag.NORMAL_ACCOUNT
        | UserAccountControlFlag.DONT_EXPIRE_PASSWORD
    )
    if enabled:
        return int(value & ~UserAccountControlFlag.ACCOUNTDISABLE)
    return int(value | UserAccountControlFlag.ACCOUNTDISABLE)
