import logging
from typing import Any, Dict, List
from uuid import uuid4

from langchain_core.messages import ToolMessage
from langchain_core.tools import BaseTool

from confluence_gateway.gateway.schema.tool_schema import (
    OperationResult,
    ToolDescription,
)
from confluence_gateway.gateway.tools.tool_provider import ToolProvider
from confluence_gateway.gateway.utilities.case_converter import CaseConverter
from confluence_gateway.gateway.utilities.confluence.confluence_arguments import (
    ConfluenceArguments,
)
from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ArgumentsNotAnObjectError,
)

logger = logging.getLogger(__name__)


class ToolManager:
    def __init__(self, *, tool_provider: ToolProvider) -> None:
        self.tool_provider: ToolProvider = tool_provider
        assert self.tool_provider is not None
        assert isinstance(self.tool_provider, ToolProvider)

    def get_tools(self) -> List[BaseTool]:
        return self.tool_provider.get_tools()

    def get_tool(self, *, name: str) -> BaseTool:
        return self.tool_provider.get_tool_by_name(name=name)

    @staticmethod
    def get_input_schema(tool: BaseTool) -> Dict[str, Any]:
        """
        Returns the JSON schema of the tool arguments with camelCase names.

        :param tool: the tool
        :return: JSON schema object
        """
        schema: Dict[str, Any] = tool.get_input_schema().model_json_schema()
        properties: Dict[str, Any] = schema.get("properties", {})
        return {
            "type": "object",
            "properties": {
                CaseConverter.snake_to_camel(name): {
                    key: value for key, value in definition.items() if key != "title"
                }
                for name, definition in properties.items()
            },
            "required": [
                CaseConverter.snake_to_camel(name)
                for name in schema.get("required", [])
            ],
        }

    def describe_tools(self) -> List[ToolDescription]:
        return [
            ToolDescription(
                name=tool.name,
                description=tool.description,
                input_schema=self.get_input_schema(tool),
            )
            for tool in self.get_tools()
        ]

    async def call_tool_async(self, *, name: str, arguments: Any) -> OperationResult:
        """
        Runs a tool and returns its text result.

        Failures of the tool are returned as error results; only an unknown
        tool name raises.

        :param name: name of the tool
        :param arguments: untyped argument object sent by the caller
        :return: result of the call
        """
        tool: BaseTool = self.get_tool(name=name)
        try:
            args: Dict[str, Any] = ConfluenceArguments.extract_arguments(arguments)
        except ArgumentsNotAnObjectError as e:
            return OperationResult(content=str(e), is_error=True)

        logger.info(f"Calling tool {name} with arguments: {sorted(args)}")
        message: ToolMessage = await tool.ainvoke(
            {"name": name, "args": args, "id": str(uuid4()), "type": "tool_call"}
        )
        return OperationResult(
            content=str(message.content), is_error=message.status == "error"
        )
