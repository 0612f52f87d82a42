from typing import Dict, List

from langchain_core.tools import BaseTool

from confluence_gateway.gateway.tools.confluence_create_content_tool import (
    ConfluenceCreateContentTool,
)
from confluence_gateway.gateway.tools.confluence_get_content_tool import (
    ConfluenceGetContentTool,
)
from confluence_gateway.gateway.tools.confluence_list_spaces_tool import (
    ConfluenceListSpacesTool,
)
from confluence_gateway.gateway.tools.confluence_search_content_tool import (
    ConfluenceSearchContentTool,
)
from confluence_gateway.gateway.tools.confluence_update_content_tool import (
    ConfluenceUpdateContentTool,
)
from confluence_gateway.gateway.utilities.confluence.confluence_client import (
    ConfluenceClient,
)
from confluence_gateway.gateway.utilities.confluence.confluence_content_updater import (
    ConfluenceContentUpdater,
)


class UnknownToolError(ValueError):
    def __init__(self, name: str):
        super().__init__(f"Tool with name {name} not found")
        self.name = name


class ToolProvider:
    def __init__(
        self,
        *,
        confluence_client: ConfluenceClient,
        content_updater: ConfluenceContentUpdater,
    ) -> None:
        tools: List[BaseTool] = [
            ConfluenceGetContentTool(confluence_client=confluence_client),
            ConfluenceSearchContentTool(confluence_client=confluence_client),
            ConfluenceCreateContentTool(confluence_client=confluence_client),
            ConfluenceUpdateContentTool(content_updater=content_updater),
            ConfluenceListSpacesTool(confluence_client=confluence_client),
        ]
        self.tools: Dict[str, BaseTool] = {tool.name: tool for tool in tools}

    def get_tool_by_name(self, *, name: str) -> BaseTool:
        if name in self.tools:
            return self.tools[name]
        raise UnknownToolError(name)

    def get_tools(self) -> List[BaseTool]:
        return list(self.tools.values())
