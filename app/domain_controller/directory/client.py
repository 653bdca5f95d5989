"""Directory client over ldap3.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import asyncio
from contextlib import asynccontextmanager
from functools import partial
from typing import Any, AsyncIterator, Callable, Sequence

from ldap3 import (
    ALL_ATTRIBUTES,
    BASE,
    LEVEL,
    MODIFY_ADD,
    MODIFY_DELETE,
    MODIFY_REPLACE,
    NONE,
    SUBTREE,
    Connection,
    Server,
)
from ldap3.core.exceptions import LDAPCommunicationError, LDAPException
from ldap3.core.results import RESULT_NO_SUCH_OBJECT, RESULT_SUCCESS

from config import Settings
from enums import SearchScope

from .dto import AttributeModification, DirectoryEntry, ModificationType
from .exceptions import (
    DirectoryConnectionError,
    DirectoryError,
    DirectoryOperationError,
)
from .utils import log

_SCOPES = {
    SearchScope.BASE: BASE,
    SearchScope.ONELEVEL: LEVEL,
    SearchScope.SUBTREE: SUBTREE,
}

_OPERATIONS = {
    ModificationType.ADD: MODIFY_ADD,
    ModificationType.REMOVE: MODIFY_DELETE,
    ModificationType.REPLACE: MODIFY_REPLACE,
}


def _decode(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class DirectoryConnection:
    """Bound directory connection.

    Every blocking ldap3 call runs in the default executor.
    """

    def __init__(self, connection: Connection) -> None:
        """Set connection."""
        self._connection = connection

    async def _run(self, func: Callable[..., Any], /, **kwargs: Any) -> Any:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, partial(func, **kwargs))
        except LDAPCommunicationError as err:
            raise DirectoryConnectionError(str(err)) from err
        except LDAPException as err:
            raise DirectoryOperationError(str(err)) from err

    def _raise_for_result(self, dn: str) -> None:
        result = self._connection.result or {}
        raise DirectoryOperationError(
            result.get("description") or "operation failed",
            dn=dn,
            result=result.get("result"),
            message=result.get("message", ""),
        )

    async def bind(self) -> None:
        """Bind with service credentials."""
        if not await self._run(self._connection.bind):
            self._raise_for_result(self._connection.user)

    async def unbind(self) -> None:
        await self._run(self._connection.unbind)

    async def search(
        self,
        base_dn: str,
        search_filter: str,
        scope: SearchScope,
    ) -> list[DirectoryEntry]:
        """Search entries.

        :param str base_dn: search base
        :param str search_filter: LDAP filter
        :param SearchScope scope: search scope
        :raises DirectoryOperationError: on non-success result
        :return list[DirectoryEntry]: found entries, empty when
            base does not exist
        """
        found = await self._run(
            self._connection.search,
            search_base=base_dn,
            search_filter=search_filter,
            search_scope=_SCOPES[scope],
            attributes=ALL_ATTRIBUTES,
        )
        if not found:
            result = self._connection.result or {}
            if result.get("result") in (RESULT_SUCCESS, RESULT_NO_SUCH_OBJECT):
                return []
            self._raise_for_result(base_dn)

        return [
            DirectoryEntry.create(
                dn=item["dn"],
                attributes={
                    name: [_decode(value) for value in values]
                    for name, values in item["raw_attributes"].items()
                },
            )
            for item in self._connection.response or []
            if item.get("type") == "searchResEntry"
        ]

    async def modify(
        self,
        dn: str,
        changes: Sequence[AttributeModification],
    ) -> None:
        """Apply all changes to entry in one modify request."""
        if not changes:
            return

        request: dict[str, list[tuple[str, list[str]]]] = {}
        for change in changes:
            request.setdefault(change.attribute, []).append(
                (_OPERATIONS[change.operation], list(change.values)),
            )

        log.debug(f"Modify {dn}: {request}")
        if not await self._run(
            self._connection.modify,
            dn=dn,
            changes=request,
        ):
            self._raise_for_result(dn)


class DirectoryClient:
    """Directory client.

    Opens one bound connection per unit of work.
    """

    def __init__(self, settings: Settings) -> None:
        """Set settings."""
        self._settings = settings

    def _create_connection(self) -> Connection:
        server = Server(
            self._settings.LDAP_URI,
            connect_timeout=self._settings.LDAP_CONNECT_TIMEOUT,
            get_info=NONE,
        )
        return Connection(
            server,
            user=self._settings.LDAP_BIND_DN,
            password=self._settings.LDAP_BIND_PASSWORD,
            raise_exceptions=False,
        )

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[DirectoryConnection]:
        """Get bound connection, unbound on every exit path."""
        connection = DirectoryConnection(self._create_connection())
        try:
            await connection.bind()
            yield connection
        finally:
            try:
                await connection.unbind()
            except DirectoryError as err:
                log.warning(f"Unbind failed: {err}")
