from typing import Dict, Literal, Optional, Type

from pydantic import BaseModel, Field

from confluence_gateway.gateway.tools.confluence_base_tool import ConfluenceBaseTool
from confluence_gateway.gateway.utilities.confluence.confluence_client import (
    ConfluenceClient,
)
from confluence_gateway.gateway.utilities.confluence.confluence_arguments import (
    ConfluenceArguments,
)
from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ConfluenceTransportError,
)


class ConfluenceListSpacesToolInput(BaseModel):
    """
    Input model for listing and searching Confluence spaces.
    """

    search_text: Optional[str] = Field(
        default=None,
        description="Text to search for in space names or descriptions (optional, returns all spaces if omitted)",
    )
    limit: Optional[float] = Field(
        default=None,
        strict=True,
        allow_inf_nan=False,
        description="Maximum number of spaces to return",
    )
    start: Optional[float] = Field(
        default=None,
        strict=True,
        allow_inf_nan=False,
        description="The starting index of the results to return",
    )
    expand: Optional[str] = Field(
        default=None, description="Comma-separated list of properties to expand"
    )


class ConfluenceListSpacesTool(ConfluenceBaseTool):
    # Confluence DC has no space search endpoint, so spaces are found via CQL
    name: str = "confluence_list_spaces"
    description: str = (
        "List and search for spaces in Confluence Data Center edition instance"
    )

    args_schema: Type[BaseModel] = ConfluenceListSpacesToolInput
    response_format: Literal["content", "content_and_artifact"] = "content"

    confluence_client: ConfluenceClient

    error_context: str = "error listing spaces"

    async def _arun(
        self,
        search_text: Optional[str] = None,
        limit: Optional[float] = None,
        start: Optional[float] = None,
        expand: Optional[str] = None,
    ) -> str:
        query: Dict[str, str] = ConfluenceArguments.build_common_query(
            limit=limit, start=start, expand=expand
        )
        query["cql"] = ConfluenceArguments.build_space_cql(search_text)
        try:
            payload: bytes = await self.confluence_client.do_request(
                method="GET", path="/search", query=query
            )
        except ConfluenceTransportError as e:
            raise self.to_tool_exception(e) from e
        return self.to_text(payload)
