"""Utils for membership module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from loguru import logger as loguru_logger

log = loguru_logger.bind(name="membership")

log.add(
    "logs/membership_{time:DD-MM-YYYY}.log",
    filter=lambda rec: rec["extra"].get("name") == "membership",
    retention="10 days",
    rotation="1d",
    colorize=False,
)
