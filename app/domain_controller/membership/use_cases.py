"""Group and user use cases.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from config import Settings
from domain_controller.directory import (
    AttributeModification,
    DirectoryClient,
    DirectoryConnection,
    DirectoryEntry,
    ModificationType,
    create_dn,
    format_filter,
    is_dn,
)
from domain_controller.domain_tool import AbstractDomainTool, DomainUserSpec

from .dto import (
    GroupDTO,
    GroupItemDTO,
    NewGroupDTO,
    NewUserDTO,
    UserDTO,
    UserUpdateDTO,
)
from .exceptions import (
    GroupAlreadyExistsError,
    GroupNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .mapper import map_group, map_group_item, map_user
from .reconciler import MembershipReconciler
from .user_account_control import (
    parse_user_account_control,
    update_user_account_control,
)
from .utils import log


def _to_dns(names: list[str], rdn: str, base_dn: str) -> list[str]:
    """Turn plain names into DNs, values holding a DN are kept."""
    return [
        name if is_dn(name) else create_dn(rdn, name, base_dn)
        for name in names
    ]


_MIN_QUERY_LENGTH = 3


def is_group_query_result(group: GroupDTO, query: str) -> bool:
    """Check group name, description or a member contains query.

    Matching ignores case and surrounding blanks of query. Queries
    shorter than three characters match no group.
    """
    query = query.strip().casefold()
    if len(query) < _MIN_QUERY_LENGTH:
        return False

    values = [group.name, group.description or "", *group.members]
    return any(query in value.casefold() for value in values)


def _attribute_change(
    entry: DirectoryEntry,
    attribute: str,
    value: str | None,
) -> AttributeModification | None:
    """Get change making attribute single-valued ``value``.

    Empty value removes the attribute.
    """
    current = entry.get_values(attribute)
    if not value:
        if current:
            return AttributeModification(ModificationType.REMOVE, attribute)
        return None

    if not current:
        return AttributeModification(
            ModificationType.ADD,
            attribute,
            (value,),
        )
    if current == {value}:
        return None
    return AttributeModification(
        ModificationType.REPLACE,
        attribute,
        (value,),
    )


class GroupUseCase:
    """Domain group use case."""

    def __init__(
        self,
        directory: DirectoryClient,
        domain_tool: AbstractDomainTool,
        reconciler: MembershipReconciler,
        settings: Settings,
    ) -> None:
        """Initialize group use case."""
        self._directory = directory
        self._domain_tool = domain_tool
        self._reconciler = reconciler
        self._settings = settings

    async def _find_group(
        self,
        connection: DirectoryConnection,
        name: str,
    ) -> DirectoryEntry | None:
        entries = await connection.search(
            self._settings.GROUP_BASE_DN,
            format_filter(self._settings.GROUP_FIND_ONE_FILTER, name),
            self._settings.GROUP_FIND_ONE_SEARCH_SCOPE,
        )
        return entries[0] if entries else None

    async def _get_group(
        self,
        connection: DirectoryConnection,
        name: str,
    ) -> DirectoryEntry:
        entry = await self._find_group(connection, name)
        if entry is None:
            raise GroupNotFoundError("Group not found", name=name)
        return entry

    async def get_groups(self, query: str | None = None) -> list[GroupItemDTO]:
        """Get groups ordered by name ignoring case.

        A blank or missing query returns all groups, otherwise only
        groups matching it, see :func:`is_group_query_result`.
        """
        async with self._directory.connect() as connection:
            entries = await connection.search(
                self._settings.GROUP_BASE_DN,
                self._settings.GROUP_FIND_ALL_FILTER,
                self._settings.GROUP_FIND_ALL_SEARCH_SCOPE,
            )

        if query and query.strip():
            member_attr = self._settings.GROUP_MEMBER_ATTR
            entries = [
                entry
                for entry in entries
                if is_group_query_result(map_group(entry, member_attr), query)
            ]

        groups = [map_group_item(entry) for entry in entries]
        return sorted(groups, key=lambda group: group.name.casefold())

    async def get_group(self, name: str) -> GroupDTO:
        """Get group with members.

        :raises GroupNotFoundError: group does not exist
        """
        async with self._directory.connect() as connection:
            entry = await self._get_group(connection, name)
        return map_group(entry, self._settings.GROUP_MEMBER_ATTR)

    async def add_group(self, group: NewGroupDTO) -> GroupDTO:
        """Create group and set its members.

        :raises GroupAlreadyExistsError: group exists
        """
        async with self._directory.connect() as connection:
            if await self._find_group(connection, group.name) is not None:
                raise GroupAlreadyExistsError(
                    "Group already exists",
                    name=group.name,
                )

        await self._domain_tool.create_group(group.name)
        log.info(f"Group {group.name} created")
        return await self.update_group_members(group.name, group.members)

    async def update_group_members(
        self,
        name: str,
        members: list[str],
    ) -> GroupDTO:
        """Make group members equal to ``members``.

        Plain user names are turned into DNs below the user base DN.

        :raises GroupNotFoundError: group does not exist
        :raises MembershipUpdateError: modify failed
        """
        attribute = self._settings.GROUP_MEMBER_ATTR
        async with self._directory.connect() as connection:
            entry = await self._get_group(connection, name)
            await self._reconciler.update_members(
                connection,
                entry,
                attribute,
                _to_dns(
                    members,
                    self._settings.USER_RDN,
                    self._settings.USER_BASE_DN,
                ),
            )
            entry = await self._get_group(connection, name)

        return map_group(entry, attribute)

    async def delete_group(self, name: str) -> None:
        """Delete group.

        :raises GroupNotFoundError: group does not exist
        """
        async with self._directory.connect() as connection:
            await self._get_group(connection, name)

        await self._domain_tool.delete_group(name)
        log.info(f"Group {name} deleted")


class UserUseCase:
    """Domain user use case."""

    def __init__(
        self,
        directory: DirectoryClient,
        domain_tool: AbstractDomainTool,
        reconciler: MembershipReconciler,
        settings: Settings,
    ) -> None:
        """Initialize user use case."""
        self._directory = directory
        self._domain_tool = domain_tool
        self._reconciler = reconciler
        self._settings = settings

    async def _find_user(
        self,
        connection: DirectoryConnection,
        name: str,
    ) -> DirectoryEntry | None:
        entries = await connection.search(
            self._settings.USER_BASE_DN,
            format_filter(self._settings.USER_FIND_ONE_FILTER, name),
            self._settings.USER_FIND_ONE_SEARCH_SCOPE,
        )
        return entries[0] if entries else None

    async def _get_user(
        self,
        connection: DirectoryConnection,
        name: str,
    ) -> DirectoryEntry:
        entry = await self._find_user(connection, name)
        if entry is None:
            raise UserNotFoundError("User not found", name=name)
        return entry

    def _map(self, entry: DirectoryEntry) -> UserDTO:
        return map_user(entry, self._settings.USER_GROUP_ATTR)

    async def _update_groups(
        self,
        connection: DirectoryConnection,
        entry: DirectoryEntry,
        groups: list[str],
    ) -> None:
        await self._reconciler.update_back_references(
            connection,
            entry,
            self._settings.USER_GROUP_ATTR,
            self._settings.GROUP_MEMBER_ATTR,
            _to_dns(
                groups,
                self._settings.GROUP_RDN,
                self._settings.GROUP_BASE_DN,
            ),
        )

    async def get_users(self) -> list[UserDTO]:
        """Get all users ordered by name ignoring case."""
        async with self._directory.connect() as connection:
            entries = await connection.search(
                self._settings.USER_BASE_DN,
                self._settings.USER_FIND_ALL_FILTER,
                self._settings.USER_FIND_ALL_SEARCH_SCOPE,
            )

        users = [self._map(entry) for entry in entries]
        return sorted(users, key=lambda user: user.user_name.casefold())

    async def user_exists(self, name: str) -> bool:
        async with self._directory.connect() as connection:
            return await self._find_user(connection, name) is not None

    async def get_user(self, name: str) -> UserDTO:
        """Get user.

        :raises UserNotFoundError: user does not exist
        """
        async with self._directory.connect() as connection:
            entry = await self._get_user(connection, name)
        return self._map(entry)

    async def add_user(self, user: NewUserDTO) -> UserDTO:
        """Create user, then set its attributes and groups.

        :raises UserAlreadyExistsError: user exists
        """
        if await self.user_exists(user.user_name):
            raise UserAlreadyExistsError(
                "User already exists",
                name=user.user_name,
            )

        await self._domain_tool.create_user(
            DomainUserSpec(
                user_name=user.user_name,
                password=user.password,
                display_name=user.display_name,
                email=user.email,
            ),
        )
        log.info(f"User {user.user_name} created")

        return await self.update_user(
            user.user_name,
            UserUpdateDTO(
                display_name=user.display_name,
                email=user.email,
                mobile=user.mobile,
                enabled=user.enabled,
                groups=user.groups,
            ),
        )

    async def update_user(
        self,
        name: str,
        user: UserUpdateDTO,
        update_groups: bool = True,
    ) -> UserDTO:
        """Update user attributes and, optionally, groups.

        ``displayName`` and ``gecos`` both take the display name.
        ``userAccountControl`` always gets the normal account and
        password-never-expires flags, the disable flag follows
        ``enabled``.

        :raises UserNotFoundError: user does not exist
        :raises DirectoryError: attribute modify failed
        :raises MembershipUpdateError: group modify failed
        """
        async with self._directory.connect() as connection:
            entry = await self._get_user(connection, name)

            uac = update_user_account_control(
                parse_user_account_control(
                    entry.get_first("userAccountControl"),
                ),
                user.enabled,
            )
            changes = [
                change
                for change in (
                    _attribute_change(
                        entry,
                        "displayName",
                        user.display_name,
                    ),
                    _attribute_change(entry, "gecos", user.display_name),
                    _attribute_change(entry, "mail", user.email),
                    _attribute_change(entry, "telephoneNumber", user.mobile),
                    _attribute_change(
                        entry,
                        "userAccountControl",
                        str(uac),
                    ),
                )
                if change is not None
            ]
            if changes:
                log.debug(f"{entry.dn}: {len(changes)} modification(s)")
                await connection.modify(entry.dn, changes)

            if update_groups:
                await self._update_groups(connection, entry, user.groups)

            entry = await self._get_user(connection, name)

        return self._map(entry)

    async def update_user_groups(
        self,
        name: str,
        groups: list[str],
    ) -> UserDTO:
        """Make user a member of exactly ``groups``.

        Only the group entries are written, the user's back-reference
        attribute follows them.

        :raises UserNotFoundError: user does not exist
        :raises MembershipUpdateError: group modify failed
        """
        async with self._directory.connect() as connection:
            entry = await self._get_user(connection, name)
            await self._update_groups(connection, entry, groups)
            entry = await self._get_user(connection, name)

        return self._map(entry)

    async def update_user_password(self, name: str, password: str) -> None:
        """Set new user password."""
        await self._domain_tool.set_password(name, password)
        log.info(f"Password of user {name} updated")

    async def delete_user(self, name: str) -> None:
        """Delete user.

        :raises UserNotFoundError: user does not exist
        """
        async with self._directory.connect() as connection:
            await self._get_user(connection, name)

        await self._domain_tool.delete_user(name)
        log.info(f"User {name} deleted")
