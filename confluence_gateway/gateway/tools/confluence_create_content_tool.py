from typing import Literal, Optional, Type

from pydantic import BaseModel, Field, field_validator

from confluence_gateway.gateway.tools.confluence_base_tool import ConfluenceBaseTool
from confluence_gateway.gateway.utilities.confluence.confluence_client import (
    ConfluenceClient,
)
from confluence_gateway.gateway.utilities.confluence.confluence_content import (
    Ancestor,
    ConfluenceContent,
    ContentBody,
    SpaceRef,
)
from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ConfluenceTransportError,
)

CONTENT_TYPES = ("page", "blogpost")


class ConfluenceCreateContentToolInput(BaseModel):
    """
    Input model for creating a Confluence page or blog post.
    """

    title: str = Field(..., min_length=1, description="The title of the new content")
    space_key: str = Field(
        ...,
        min_length=1,
        description="The key of the space where content will be created",
    )
    content: str = Field(
        ...,
        min_length=1,
        description="The content of the page in Confluence storage format",
    )
    type: Optional[str] = Field(
        default=None, description="The type of content (page or blogpost)"
    )
    parent_id: Optional[str] = Field(
        default=None, description="The ID of the parent content (optional)"
    )

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: Optional[str]) -> str:
        if not value:
            return "page"
        if value not in CONTENT_TYPES:
            raise ValueError(f"type must be one of: {', '.join(CONTENT_TYPES)}")
        return value


class ConfluenceCreateContentTool(ConfluenceBaseTool):
    name: str = "confluence_create_content"
    description: str = "Create new content in Confluence Data Center edition instance"

    args_schema: Type[BaseModel] = ConfluenceCreateContentToolInput
    response_format: Literal["content", "content_and_artifact"] = "content"

    confluence_client: ConfluenceClient

    error_context: str = "error creating content"

    @staticmethod
    def build_payload(
        *,
        title: str,
        space_key: str,
        content: str,
        type: Optional[str] = None,
        parent_id: Optional[str] = None,
    ) -> ConfluenceContent:
        return ConfluenceContent(
            type=type or "page",
            title=title,
            space=SpaceRef(key=space_key),
            body=ContentBody.from_storage_value(content),
            ancestors=[Ancestor(id=parent_id)] if parent_id else None,
        )

    async def _arun(
        self,
        title: str,
        space_key: str,
        content: str,
        type: Optional[str] = None,
        parent_id: Optional[str] = None,
    ) -> str:
        payload: ConfluenceContent = self.build_payload(
            title=title,
            space_key=space_key,
            content=content,
            type=type,
            parent_id=parent_id,
        )
        try:
            response: bytes = await self.confluence_client.do_request(
                method="POST", path="/content", body=payload
            )
        except ConfluenceTransportError as e:
            raise self.to_tool_exception(e) from e
        return self.to_text(response)
