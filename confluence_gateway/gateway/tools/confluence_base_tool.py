import logging
from abc import ABCMeta

from langchain_core.tools import ToolException

from confluence_gateway.gateway.tools.resilient_base_tool import ResilientBaseTool
from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ConfluenceGatewayError,
)

logger = logging.getLogger(__name__)


class ConfluenceBaseTool(ResilientBaseTool, metaclass=ABCMeta):
    """
    Base class for tools that relay a call to the Confluence REST API.
    """

    error_context: str = "error calling Confluence"
    """Prefix for error messages returned to the caller"""

    def to_tool_exception(self, error: ConfluenceGatewayError) -> ToolException:
        error_msg: str = (
            f"{self.error_context}: {error}" if self.error_context else str(error)
        )
        logger.error(f"{self.name}: {error_msg}")
        return ToolException(error_msg)

    @staticmethod
    def to_text(payload: bytes) -> str:
        # results are text, so bytes that are not UTF-8 cannot pass unchanged
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(
                f"Confluence response is not valid UTF-8 at byte {e.start}; "
                "undecodable bytes were replaced with U+FFFD"
            )
            return payload.decode("utf-8", errors="replace")

    def _run(self, *args: object, **kwargs: object) -> str:
        """
        Synchronous version of the tool (falls back to async implementation).

        Raises:
            NotImplementedError: Always raises to enforce async usage
        """
        raise NotImplementedError("Use async version of this tool")
