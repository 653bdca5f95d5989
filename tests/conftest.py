"""Test main config.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from dishka import (
    AsyncContainer,
    Provider,
    Scope,
    from_context,
    make_async_container,
    provide,
)
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from api.dns.adapter import DNSFastAPIAdapter
from api.groups.adapter import GroupFastAPIAdapter
from api.users.adapter import UserFastAPIAdapter
from config import DNSTopologySettings, Settings
from dc_connector import _create_basic_app
from domain_controller.directory import DirectoryClient
from domain_controller.dns.synchronizer import DNSSynchronizer
from domain_controller.dns.use_cases import DNSUseCase
from domain_controller.domain_tool import AbstractDomainTool, StubDomainTool
from domain_controller.membership import (
    GroupUseCase,
    MembershipReconciler,
    UserUseCase,
)
from tests.fakes import (
    GROUP_BASE_DN,
    USER_BASE_DN,
    FakeDirectoryClient,
    FakeDomainTool,
)


class TestProvider(Provider):
    """Test provider."""

    __test__ = False

    scope = Scope.RUNTIME
    settings = from_context(provides=Settings, scope=Scope.RUNTIME)

    def __init__(
        self,
        domain_tool: FakeDomainTool,
        directory: FakeDirectoryClient,
    ) -> None:
        """Set in-memory collaborators."""
        super().__init__()
        self._domain_tool = domain_tool
        self._directory = directory

    @provide(scope=Scope.APP)
    def get_topology(self, settings: Settings) -> DNSTopologySettings:
        """Get DNS topology."""
        return DNSTopologySettings.from_settings(settings)

    @provide(scope=Scope.APP, provides=AbstractDomainTool)
    def get_domain_tool(self) -> StubDomainTool:
        """Get in-memory domain tool."""
        return self._domain_tool

    @provide(scope=Scope.APP, provides=DirectoryClient)
    def get_directory(self) -> FakeDirectoryClient:
        """Get in-memory directory."""
        return self._directory

    reconciler = provide(MembershipReconciler, scope=Scope.APP)
    dns_synchronizer = provide(DNSSynchronizer, scope=Scope.REQUEST)
    dns_use_case = provide(DNSUseCase, scope=Scope.REQUEST)
    group_use_case = provide(GroupUseCase, scope=Scope.REQUEST)
    user_use_case = provide(UserUseCase, scope=Scope.REQUEST)
    dns_fastapi_adapter = provide(DNSFastAPIAdapter, scope=Scope.REQUEST)
    group_fastapi_adapter = provide(GroupFastAPIAdapter, scope=Scope.REQUEST)
    user_fastapi_adapter = provide(UserFastAPIAdapter, scope=Scope.REQUEST)


@pytest.fixture
def settings() -> Settings:
    """Get settings."""
    return Settings(
        LDAP_BIND_DN="cn=Administrator,cn=Users,dc=example,dc=org",
        LDAP_BIND_PASSWORD="secret",  # noqa: S106
        GROUP_BASE_DN=GROUP_BASE_DN,
        USER_BASE_DN=USER_BASE_DN,
        DOMAIN_TOOL_KIND="stub",
        USING_SUDO=False,
    )


@pytest.fixture
def topology(settings: Settings) -> DNSTopologySettings:
    """Get DNS topology of test settings."""
    return DNSTopologySettings.from_settings(settings)


@pytest.fixture
def domain_tool(directory: FakeDirectoryClient) -> FakeDomainTool:
    """Get in-memory domain tool without zones."""
    return FakeDomainTool(directory.connection)


@pytest.fixture
def directory() -> FakeDirectoryClient:
    """Get directory with two users and two groups."""
    client = FakeDirectoryClient()
    connection = client.connection

    connection.add_entry(
        f"cn=alice,{USER_BASE_DN}",
        objectClass=["top", "user"],
        sAMAccountName="alice",
        displayName="Alice",
        userAccountControl="512",
        whenCreated="20191226154554.0Z",
    )
    connection.add_entry(
        f"cn=bob,{USER_BASE_DN}",
        objectClass=["top", "user"],
        sAMAccountName="bob",
        userAccountControl="514",
    )
    connection.add_entry(
        f"cn=admins,{GROUP_BASE_DN}",
        objectClass=["top", "group"],
        sAMAccountName="admins",
        description="Administrators",
        member=[f"cn=alice,{USER_BASE_DN}"],
    )
    connection.add_entry(
        f"cn=staff,{GROUP_BASE_DN}",
        objectClass=["top", "group"],
        sAMAccountName="staff",
    )
    return client


@pytest.fixture
def group_use_case(
    directory: FakeDirectoryClient,
    domain_tool: FakeDomainTool,
    settings: Settings,
) -> GroupUseCase:
    return GroupUseCase(
        directory,  # type: ignore
        domain_tool,
        MembershipReconciler(),
        settings,
    )


@pytest.fixture
def user_use_case(
    directory: FakeDirectoryClient,
    domain_tool: FakeDomainTool,
    settings: Settings,
) -> UserUseCase:
    return UserUseCase(
        directory,  # type: ignore
        domain_tool,
        MembershipReconciler(),
        settings,
    )


@pytest_asyncio.fixture
async def container(
    settings: Settings,
    domain_tool: FakeDomainTool,
    directory: FakeDirectoryClient,
) -> AsyncIterator[AsyncContainer]:
    """Create test container."""
    ctnr = make_async_container(
        TestProvider(domain_tool, directory),
        context={Settings: settings},
        start_scope=Scope.RUNTIME,
    )
    yield ctnr
    await ctnr.close()


@pytest_asyncio.fixture
async def app(
    settings: Settings,
    container: AsyncContainer,
) -> AsyncIterator[FastAPI]:
    """App creator fixture."""
    async with container(scope=Scope.APP) as container:
        app = _create_basic_app(settings)
        setup_dishka(container, app)
        yield app


@pytest_asyncio.fixture
async def http_client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Get async client for fastapi tests.

    :param FastAPI app: asgi app
    :yield Iterator[AsyncIterator[httpx.AsyncClient]]: yield client
    """
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app, root_path="/api"),
        timeout=3,
        base_url="http://test",
    ) as client:
        yield client
