"""samba-tool backed domain tool.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Collection

from config import Settings
from domain_controller.dns.dto import DNSEntryDTO, DNSZoneDTO
from domain_controller.dns.exceptions import DNSZoneNotFoundError

from .base import (
    AbstractDomainTool,
    DomainUserSpec,
    contains_name,
    contains_record,
)
from .exceptions import DomainToolInvocationError, DomainToolPostConditionError
from .executor import CommandExecutor, CommandResponse
from .parser import SambaToolResponseParser
from .utils import logger_wraps

_ZONE_DOES_NOT_EXIST = "ZONE_DOES_NOT_EXIST"


class SambaTool(AbstractDomainTool):
    """Run samba-tool with Kerberos authentication.

    A ticket is requested with ``kinit`` and the administrator password
    file before each call, both optionally through ``sudo``.
    """

    def __init__(
        self,
        settings: Settings,
        executor: CommandExecutor,
        parser: SambaToolResponseParser,
    ) -> None:
        """Set up samba-tool."""
        self._settings = settings
        self._executor = executor
        self._parser = parser

    def _with_sudo(self, commands: list[str]) -> list[str]:
        if self._settings.USING_SUDO:
            return [self._settings.SUDO_BINARY, *commands]
        return commands

    async def _kinit(self) -> None:
        commands = self._with_sudo([
            self._settings.KINIT_BINARY,
            f"--password-file={self._settings.KINIT_PASSWORD_FILE}",
            self._settings.KINIT_ADMINISTRATOR_NAME,
        ])
        response = await self._executor.exec(
            commands,
            cwd=self._settings.SAMBA_TOOL_EXEC_DIR,
        )
        if response.returncode != 0:
            raise DomainToolInvocationError(
                "kinit failed",
                output=response.output,
            )

    async def _run(
        self,
        *args: str,
        secrets: Collection[str] = (),
    ) -> CommandResponse:
        await self._kinit()
        commands = self._with_sudo([
            self._settings.SAMBA_TOOL_BINARY,
            *args,
            "--use-kerberos=required",
        ])
        return await self._executor.exec(
            commands,
            cwd=self._settings.SAMBA_TOOL_EXEC_DIR,
            secrets=secrets,
        )

    async def _read(self, *args: str) -> CommandResponse:
        response = await self._run(*args)
        if response.returncode != 0:
            raise DomainToolInvocationError(
                f"samba-tool {' '.join(args[:2])} failed",
                output=response.output,
            )
        return response

    @property
    def _server(self) -> str:
        return self._settings.NAME_SERVER_HOST

    @logger_wraps()
    async def list_zones(self) -> list[DNSZoneDTO]:
        response = await self._read("dns", "zonelist", self._server)
        return self._parser.parse_zones(response.stdout)

    @logger_wraps()
    async def list_records(self, zone: str) -> list[DNSEntryDTO]:
        """Get all entries of zone.

        :raises DNSZoneNotFoundError: zone does not exist
        """
        response = await self._run(
            "dns",
            "query",
            self._server,
            zone,
            "@",
            "ALL",
        )
        if response.returncode != 0:
            if _ZONE_DOES_NOT_EXIST in response.output:
                raise DNSZoneNotFoundError("Zone not found", zone=zone)
            raise DomainToolInvocationError(
                "samba-tool dns query failed",
                zone=zone,
                output=response.output,
            )
        return self._parser.parse_entries(response.stdout)

    async def _zone_exists(self, zone: str) -> bool:
        zones = await self.list_zones()
        return contains_name([item.name for item in zones], zone)

    async def _record_exists(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> bool:
        entries = await self.list_records(zone)
        return contains_record(entries, name, record_type, value)

    @logger_wraps()
    async def create_zone(self, zone: str) -> None:
        response = await self._run("dns", "zonecreate", self._server, zone)
        if not await self._zone_exists(zone):
            raise DomainToolPostConditionError(
                "Zone was not created",
                zone=zone,
                output=response.output,
            )

    @logger_wraps()
    async def delete_zone(self, zone: str) -> None:
        response = await self._run("dns", "zonedelete", self._server, zone)
        if await self._zone_exists(zone):
            raise DomainToolPostConditionError(
                "Zone was not deleted",
                zone=zone,
                output=response.output,
            )

    @logger_wraps()
    async def create_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> None:
        response = await self._run(
            "dns",
            "add",
            self._server,
            zone,
            name,
            record_type,
            value,
        )
        if not await self._record_exists(zone, name, record_type, value):
            raise DomainToolPostConditionError(
                "Record was not created",
                zone=zone,
                name=name,
                type=record_type,
                output=response.output,
            )

    @logger_wraps()
    async def delete_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        value: str,
    ) -> None:
        response = await self._run(
            "dns",
            "delete",
            self._server,
            zone,
            name,
            record_type,
            value,
        )
        if await self._record_exists(zone, name, record_type, value):
            raise DomainToolPostConditionError(
                "Record was not deleted",
                zone=zone,
                name=name,
                type=record_type,
                output=response.output,
            )

    @logger_wraps()
    async def update_record(
        self,
        zone: str,
        name: str,
        record_type: str,
        old_value: str,
        new_value: str,
    ) -> None:
        response = await self._run(
            "dns",
            "update",
            self._server,
            zone,
            name,
            record_type,
            old_value,
            new_value,
        )
        if not await self._record_exists(zone, name, record_type, new_value):
            raise DomainToolPostConditionError(
                "Record was not updated",
                zone=zone,
                name=name,
                type=record_type,
                output=response.output,
            )

    @logger_wraps()
    async def list_users(self) -> list[str]:
        response = await self._read("user", "list")
        return self._parser.parse_names(response.stdout)

    @logger_wraps()
    async def create_user(self, user: DomainUserSpec) -> None:
        args = [
            "user",
            "create",
            user.user_name,
            user.password,
            f"--login-shell={self._settings.LOGIN_SHELL}",
            "--home-directory="
            + self._settings.HOME_DIRECTORY_TEMPLATE.format(user.user_name),
            "--unix-home="
            + self._settings.UNIX_HOME_DIR_TEMPLATE.format(user.user_name),
        ]
        if user.display_name:
            args.append(f"--gecos={user.display_name}")
        if user.email:
            args.append(f"--mail-address={user.email}")

        response = await self._run(*args, secrets=(user.password,))
        if not contains_name(await self.list_users(), user.user_name):
            raise DomainToolPostConditionError(
                "User was not created",
                user=user.user_name,
                output=response.output,
            )

    @logger_wraps()
    async def delete_user(self, user_name: str) -> None:
        response = await self._run("user", "delete", user_name)
        if contains_name(await self.list_users(), user_name):
            raise DomainToolPostConditionError(
                "User was not deleted",
                user=user_name,
                output=response.output,
            )

    @logger_wraps()
    async def set_password(self, user_name: str, password: str) -> None:
        """Set new password.

        The password itself cannot be re-queried: the call must exit
        cleanly and the user must still exist afterwards.
        """
        response = await self._run(
            "user",
            "setpassword",
            user_name,
            f"--newpassword={password}",
            secrets=(password,),
        )
        if response.returncode != 0 or not contains_name(
            await self.list_users(),
            user_name,
        ):
            raise DomainToolPostConditionError(
                "Password was not set",
                user=user_name,
                output=response.output,
            )

    @logger_wraps()
    async def list_groups(self) -> list[str]:
        response = await self._read("group", "list")
        return self._parser.parse_names(response.stdout)

    @logger_wraps()
    async def create_group(self, group_name: str) -> None:
        response = await self._run("group", "add", group_name)
        if not contains_name(await self.list_groups(), group_name):
            raise DomainToolPostConditionError(
                "Group was not created",
                group=group_name,
                output=response.output,
            )

    @logger_wraps()
    async def delete_group(self, group_name: str) -> None:
        response = await self._run("group", "delete", group_name)
        if contains_name(await self.list_groups(), group_name):
            raise DomainToolPostConditionError(
                "Group was not deleted",
                group=group_name,
                output=response.output,
            )
