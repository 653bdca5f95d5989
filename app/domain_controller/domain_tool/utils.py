"""Utils for domain tool.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import functools
from typing import Any, Callable, Collection, Sequence

from loguru import logger as loguru_logger

from errors import BaseDomainException

log = loguru_logger.bind(name="domaintool")

log.add(
    "logs/domaintool_{time:DD-MM-YYYY}.log",
    filter=lambda rec: rec["extra"].get("name") == "domaintool",
    retention="10 days",
    rotation="1d",
    colorize=False,
)

_MASK = "********"


def logger_wraps(is_stub: bool = False) -> Callable:
    """Log domain tool calls."""

    def wrapper(func: Callable) -> Callable:
        name = func.__name__
        bus_type = " stub " if is_stub else " "

        @functools.wraps(func)
        async def wrapped(*args: Any, **kwargs: Any) -> Any:
            logger = log.opt(depth=1)

            logger.info(f"Calling{bus_type}'{name}'")
            try:
                result = await func(*args, **kwargs)
            except BaseDomainException as err:
                logger.error(f"{name} call raised: {err}")
                raise

            else:
                if not is_stub:
                    logger.success(f"Executed {name}")
            return result

        return wrapped

    return wrapper


def mask_secrets(
    commands: Sequence[str],
    secrets: Collection[str],
) -> list[str]:
    """Hide every secret occurring in command arguments."""
    masked = []
    for arg in commands:
        for secret in secrets:
            if secret:
                arg = arg.replace(secret, _MASK)
        masked.append(arg)
    return masked
