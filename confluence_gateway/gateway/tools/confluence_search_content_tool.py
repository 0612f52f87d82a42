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


class ConfluenceSearchContentToolInput(BaseModel):
    """
    Input model for searching Confluence content with CQL.
    """

    cql: str = Field(
        ...,
        min_length=1,
        description="Confluence Query Language (CQL) search string for Confluence Data Center",
    )
    limit: Optional[float] = Field(
        default=None,
        strict=True,
        allow_inf_nan=False,
        description="Maximum number of results to return (default: 25)",
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


class ConfluenceSearchContentTool(ConfluenceBaseTool):
    name: str = "confluence_search_content"
    description: str = (
        "Search for content in Confluence Data Center edition instance using CQL"
    )

    args_schema: Type[BaseModel] = ConfluenceSearchContentToolInput
    response_format: Literal["content", "content_and_artifact"] = "content"

    confluence_client: ConfluenceClient

    error_context: str = "error searching content"

    async def _arun(
        self,
        cql: str,
        limit: Optional[float] = None,
        start: Optional[float] = None,
        expand: Optional[str] = None,
    ) -> str:
        query: Dict[str, str] = ConfluenceArguments.build_common_query(
            limit=limit, start=start, expand=expand
        )
        query["cql"] = cql
        try:
            payload: bytes = await self.confluence_client.do_request(
                method="GET", path="/search", query=query
            )
        except ConfluenceTransportError as e:
            raise self.to_tool_exception(e) from e
        return self.to_text(payload)
