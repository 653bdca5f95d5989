"""External process execution.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import asyncio
import os
from dataclasses import dataclass
from typing import Collection, Mapping, Sequence

from .exceptions import DomainToolInvocationError
from .utils import log, mask_secrets


@dataclass(frozen=True)
class CommandResponse:
    """Output of a finished process."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def output(self) -> str:
        return "\n".join(part for part in (self.stdout, self.stderr) if part)


class CommandExecutor:
    """Run commands as separate processes."""

    async def exec(
        self,
        commands: Sequence[str],
        cwd: str | None = None,
        env: Mapping[str, str] | None = None,
        secrets: Collection[str] = (),
    ) -> CommandResponse:
        """Run command and wait for it.

        :param Sequence[str] commands: program and arguments
        :param str | None cwd: working directory
        :param Mapping[str, str] | None env: extra environment
        :param Collection[str] secrets: values masked in logs
        :raises DomainToolInvocationError: process could not be started
        :return CommandResponse: decoded output and exit status
        """
        masked = mask_secrets(commands, secrets)
        log.debug(f"Running external program: {masked}")

        process_env = None
        if env:
            process_env = {**os.environ, **env}

        try:
            proc = await asyncio.create_subprocess_exec(
                *commands,
                cwd=cwd or None,
                env=process_env,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except OSError as err:
            raise DomainToolInvocationError(
                "Running external program failed",
                command=" ".join(masked),
                error=err,
            ) from err

        response = CommandResponse(
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            returncode=proc.returncode or 0,
        )
        log.debug(f"Program output: {response.stdout}")
        log.debug(f"Program error output: {response.stderr}")
        return response
