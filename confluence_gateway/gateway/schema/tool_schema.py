from typing import Any, Dict

from pydantic import BaseModel


class OperationResult(BaseModel):
    """Result of a tool call"""

    content: str
    """Response body from Confluence, or the error message"""

    is_error: bool = False
    """Whether content is an error message"""


class ToolDescription(BaseModel):
    """Tool as advertised to callers"""

    name: str

    description: str

    input_schema: Dict[str, Any]
    """JSON schema of the tool arguments"""
