from confluence_gateway.container.simple_container import SimpleContainer
from confluence_gateway.gateway.http.http_client_factory import HttpClientFactory
from confluence_gateway.gateway.managers.tool_manager import ToolManager
from confluence_gateway.gateway.mcp_server.mcp_server_factory import McpServerFactory
from confluence_gateway.gateway.tools.tool_provider import ToolProvider
from confluence_gateway.gateway.utilities.confluence.confluence_client import (
    ConfluenceClient,
)
from confluence_gateway.gateway.utilities.confluence.confluence_config import (
    ConfluenceConfig,
    ConfluenceConfigResolver,
)
from confluence_gateway.gateway.utilities.confluence.confluence_content_updater import (
    ConfluenceContentUpdater,
)
from confluence_gateway.gateway.utilities.environment_variables import (
    EnvironmentVariables,
)


class ContainerFactory:
    # noinspection PyMethodMayBeStatic
    async def create_container_async(self) -> SimpleContainer:
        container = SimpleContainer()

        # register services here
        container.register(EnvironmentVariables, lambda c: EnvironmentVariables())
        container.register(
            ConfluenceConfig,
            lambda c: ConfluenceConfigResolver.resolve(c.resolve(EnvironmentVariables)),
        )
        container.register(HttpClientFactory, lambda c: HttpClientFactory())

        container.register(
            ConfluenceClient,
            lambda c: ConfluenceClient(
                http_client_factory=c.resolve(HttpClientFactory),
                confluence_config=c.resolve(ConfluenceConfig),
            ),
        )
        container.register(
            ConfluenceContentUpdater,
            lambda c: ConfluenceContentUpdater(
                confluence_client=c.resolve(ConfluenceClient)
            ),
        )
        container.register(
            ToolProvider,
            lambda c: ToolProvider(
                confluence_client=c.resolve(ConfluenceClient),
                content_updater=c.resolve(ConfluenceContentUpdater),
            ),
        )
        container.register(
            ToolManager, lambda c: ToolManager(tool_provider=c.resolve(ToolProvider))
        )
        container.register(
            McpServerFactory,
            lambda c: McpServerFactory(tool_manager=c.resolve(ToolManager)),
        )
        return container
