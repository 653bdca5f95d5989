"""DI Provider of domain controller connector.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dishka import Provider, Scope, from_context, provide

from api.dns.adapter import DNSFastAPIAdapter
from api.groups.adapter import GroupFastAPIAdapter
from api.users.adapter import UserFastAPIAdapter
from config import DNSTopologySettings, Settings
from domain_controller.directory import DirectoryClient
from domain_controller.dns.synchronizer import DNSSynchronizer
from domain_controller.dns.use_cases import DNSUseCase
from domain_controller.domain_tool import (
    AbstractDomainTool,
    CommandExecutor,
    SambaTool,
    SambaToolResponseParser,
    StubDomainTool,
)
from domain_controller.membership import (
    GroupUseCase,
    MembershipReconciler,
    UserUseCase,
)
from enums import DomainToolKind


class MainProvider(Provider):
    """Provider for domain controller connector."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_dns_topology(self, settings: Settings) -> DNSTopologySettings:
        """Compile DNS topology once."""
        return DNSTopologySettings.from_settings(settings)

    directory_client = provide(DirectoryClient, scope=Scope.APP)
    command_executor = provide(CommandExecutor, scope=Scope.APP)
    response_parser = provide(SambaToolResponseParser, scope=Scope.APP)
    reconciler = provide(MembershipReconciler, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_domain_tool(
        self,
        settings: Settings,
        executor: CommandExecutor,
        parser: SambaToolResponseParser,
    ) -> AbstractDomainTool:
        """Get domain tool, in-memory stub keeps state for app lifetime."""
        if settings.DOMAIN_TOOL_KIND == DomainToolKind.STUB:
            return StubDomainTool()
        return SambaTool(settings, executor, parser)

    dns_synchronizer = provide(DNSSynchronizer, scope=Scope.REQUEST)
    dns_use_case = provide(DNSUseCase, scope=Scope.REQUEST)
    group_use_case = provide(GroupUseCase, scope=Scope.REQUEST)
    user_use_case = provide(UserUseCase, scope=Scope.REQUEST)


class HTTPProvider(Provider):
    """HTTP adapters."""

    scope = Scope.REQUEST

    dns_fastapi_adapter = provide(DNSFastAPIAdapter, scope=Scope.REQUEST)
    group_fastapi_adapter = provide(GroupFastAPIAdapter, scope=Scope.REQUEST)
    user_fastapi_adapter = provide(UserFastAPIAdapter, scope=Scope.REQUEST)
