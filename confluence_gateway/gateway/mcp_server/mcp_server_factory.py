import logging
from typing import Any, Dict, List

from mcp.server import Server
from mcp.types import TextContent, Tool

from confluence_gateway.gateway.managers.tool_manager import ToolManager
from confluence_gateway.gateway.schema.tool_schema import OperationResult

logger = logging.getLogger(__name__)

SERVER_NAME: str = "atlassian-confluence-dc-mcp"
SERVER_VERSION: str = "1.0.0"


class ToolCallFailedError(Exception):
    """Raised to make the MCP server answer with an isError result."""

    pass


class McpServerFactory:
    def __init__(self, *, tool_manager: ToolManager) -> None:
        self.tool_manager: ToolManager = tool_manager

    def list_tools(self) -> List[Tool]:
        return [
            Tool(
                name=description.name,
                description=description.description,
                inputSchema=description.input_schema,
            )
            for description in self.tool_manager.describe_tools()
        ]

    async def call_tool_async(
        self, name: str, arguments: Dict[str, Any] | None
    ) -> List[TextContent]:
        result: OperationResult = await self.tool_manager.call_tool_async(
            name=name, arguments=arguments
        )
        if result.is_error:
            raise ToolCallFailedError(result.content)
        return [TextContent(type="text", text=result.content)]

    def create_server(self) -> Server:
        server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

        @server.list_tools()
        async def list_tools() -> List[Tool]:
            return self.list_tools()

        # argument checking is done by the tools themselves
        @server.call_tool(validate_input=False)
        async def call_tool(
            name: str, arguments: Dict[str, Any] | None
        ) -> List[TextContent]:
            return await self.call_tool_async(name, arguments)

        logger.info(f"Created MCP server {SERVER_NAME} {SERVER_VERSION}")
        return server
