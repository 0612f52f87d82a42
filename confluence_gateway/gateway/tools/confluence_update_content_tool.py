from typing import Literal, Optional, Type

from pydantic import BaseModel, Field, field_validator

from confluence_gateway.gateway.tools.confluence_base_tool import ConfluenceBaseTool
from confluence_gateway.gateway.utilities.confluence.confluence_arguments import (
    ConfluenceArguments,
)
from confluence_gateway.gateway.utilities.confluence.confluence_content_updater import (
    ConfluenceContentUpdater,
)
from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ContentUpdateError,
)


class ConfluenceUpdateContentToolInput(BaseModel):
    """
    Input model for updating existing Confluence content.

    Title and content fall back to the current values when omitted.
    """

    content_id: str = Field(
        ..., min_length=1, description="The ID of the content to update"
    )
    version: Optional[float] = Field(
        default=None,
        strict=True,
        allow_inf_nan=False,
        ge=1,
        description="The new version number (optional, defaults to current version + 1)",
    )
    title: Optional[str] = Field(default=None, description="New title for the content")
    content: Optional[str] = Field(
        default=None, description="New content in storage format"
    )
    version_comment: Optional[str] = Field(
        default=None, description="A comment for the new version"
    )

    @field_validator("content_id")
    @classmethod
    def validate_content_id(cls, value: str) -> str:
        return ConfluenceArguments.validate_content_id(value)


class ConfluenceUpdateContentTool(ConfluenceBaseTool):
    name: str = "confluence_update_content"
    description: str = "Update existing content in Confluence Data Center edition instance"

    args_schema: Type[BaseModel] = ConfluenceUpdateContentToolInput
    response_format: Literal["content", "content_and_artifact"] = "content"

    content_updater: ConfluenceContentUpdater

    # the update phases carry their own message prefix
    error_context: str = ""

    async def _arun(
        self,
        content_id: str,
        version: Optional[float] = None,
        title: Optional[str] = None,
        content: Optional[str] = None,
        version_comment: Optional[str] = None,
    ) -> str:
        try:
            response: bytes = await self.content_updater.update_async(
                content_id=content_id,
                version=version,
                title=title,
                content=content,
                version_comment=version_comment,
            )
        except ContentUpdateError as e:
            raise self.to_tool_exception(e) from e
        return self.to_text(response)
