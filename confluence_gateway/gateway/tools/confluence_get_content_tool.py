from typing import Dict, Literal, Optional, Type

from pydantic import BaseModel, Field, field_validator

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


class ConfluenceGetContentToolInput(BaseModel):
    """
    Input model for retrieving Confluence content by ID.
    """

    content_id: str = Field(
        ..., min_length=1, description="Confluence Data Center content ID"
    )
    expand: Optional[str] = Field(
        default=None, description="Comma-separated list of properties to expand"
    )

    @field_validator("content_id")
    @classmethod
    def validate_content_id(cls, value: str) -> str:
        return ConfluenceArguments.validate_content_id(value)


class ConfluenceGetContentTool(ConfluenceBaseTool):
    name: str = "confluence_get_content"
    description: str = (
        "Get Confluence content by ID from the Confluence Data Center edition instance"
    )

    args_schema: Type[BaseModel] = ConfluenceGetContentToolInput
    response_format: Literal["content", "content_and_artifact"] = "content"

    confluence_client: ConfluenceClient

    error_context: str = "error getting content"

    async def _arun(self, content_id: str, expand: Optional[str] = None) -> str:
        query: Dict[str, str] = ConfluenceArguments.build_common_query(expand=expand)
        query["expand"] = ConfluenceArguments.ensure_expand(
            query.get("expand"), "body.storage"
        )
        try:
            payload: bytes = await self.confluence_client.do_request(
                method="GET", path=f"/content/{content_id}", query=query
            )
        except ConfluenceTransportError as e:
            raise self.to_tool_exception(e) from e
        return self.to_text(payload)
