import logging
from enum import Enum
from typing import Annotated, Any, List, Sequence

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi import params

from confluence_gateway.gateway.api_container import get_tool_manager
from confluence_gateway.gateway.managers.tool_manager import ToolManager
from confluence_gateway.gateway.schema.tool_schema import (
    OperationResult,
    ToolDescription,
)
from confluence_gateway.gateway.tools.tool_provider import UnknownToolError

logger = logging.getLogger(__name__)


class ToolsRouter:
    """
    Router class for tool endpoints
    """

    def __init__(
        self,
        *,
        prefix: str = "/api/v1",
        tags: list[str | Enum] | None = None,
        dependencies: Sequence[params.Depends] | None = None,
    ) -> None:
        self.prefix = prefix
        self.tags = tags or ["tools"]
        self.dependencies = dependencies or []
        self.router = APIRouter(
            prefix=self.prefix, tags=self.tags, dependencies=self.dependencies
        )
        self._register_routes()

    def _register_routes(self) -> None:
        """Register all routes for this router"""
        self.router.add_api_route(
            "/tools",
            self.get_tools,
            methods=["GET"],
            response_model=List[ToolDescription],
            summary="List available tools",
            description="Lists the Confluence tools with their argument schemas",
            response_description="The list of available tools",
            status_code=200,
        )
        self.router.add_api_route(
            "/tools/{tool_name}",
            self.call_tool,
            methods=["POST"],
            response_model=OperationResult,
            summary="Call a tool",
            description="Calls a Confluence tool with a JSON object of arguments",
            response_description="The tool result, or the error message",
            status_code=200,
        )

    # noinspection PyMethodMayBeStatic
    async def get_tools(
        self,
        tool_manager: Annotated[ToolManager, Depends(get_tool_manager)],
    ) -> List[ToolDescription]:
        return tool_manager.describe_tools()

    # noinspection PyMethodMayBeStatic
    async def call_tool(
        self,
        tool_name: str,
        tool_manager: Annotated[ToolManager, Depends(get_tool_manager)],
        arguments: Annotated[Any, Body()] = None,
    ) -> OperationResult:
        """
        Call tool endpoint. tool_manager is injected by FastAPI.

        Args:
            tool_name: name of the tool to call
            tool_manager: Injected tool manager instance
            arguments: JSON object with the tool arguments

        Returns:
            The tool result; failures of the tool come back with is_error set
        """
        try:
            return await tool_manager.call_tool_async(
                name=tool_name, arguments=arguments
            )
        except UnknownToolError as e:
            logger.warning(str(e))
            raise HTTPException(status_code=404, detail=str(e))

    def get_router(self) -> APIRouter:
        """Get the configured router"""
        return self.router
