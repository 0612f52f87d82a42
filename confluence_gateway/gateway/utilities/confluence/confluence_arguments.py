from collections.abc import Mapping
from typing import Any, Dict, Optional

from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ArgumentsNotAnObjectError,
)

DEFAULT_LIMIT: int = 25


class ConfluenceArguments:
    """
    Maps tool arguments onto Confluence REST query parameters.
    """

    @staticmethod
    def extract_arguments(raw_arguments: Any) -> Dict[str, Any]:
        """
        Returns the tool arguments as a plain dict.

        :param raw_arguments: arguments as delivered by the caller, may be None
        :return: string-keyed dict, empty when no arguments were sent
        """
        if raw_arguments is None:
            return {}
        if not isinstance(raw_arguments, Mapping) or not all(
            isinstance(key, str) for key in raw_arguments
        ):
            raise ArgumentsNotAnObjectError()
        return dict(raw_arguments)

    @staticmethod
    def build_common_query(
        *,
        limit: Optional[float] = None,
        start: Optional[float] = None,
        expand: Optional[str] = None,
    ) -> Dict[str, str]:
        query: Dict[str, str] = {
            "limit": str(int(limit) if limit is not None else DEFAULT_LIMIT)
        }
        if start is not None:
            query["start"] = str(int(start))
        if expand:
            query["expand"] = expand
        return query

    @staticmethod
    def ensure_expand(current: Optional[str], required: str) -> str:
        """
        Adds a property to a comma-separated expand list unless already there.

        Tokens are compared trimmed and case-sensitive; the existing list is
        returned untouched when it already holds the property.
        """
        if not current:
            return required
        if any(part.strip() == required for part in current.split(",")):
            return current
        return f"{current},{required}"

    @staticmethod
    def validate_content_id(content_id: str) -> str:
        # the id is appended to the request path
        if "/" in content_id or ".." in content_id:
            raise ValueError("invalid contentId format")
        return content_id

    @staticmethod
    def build_space_cql(search_text: Optional[str]) -> str:
        if not search_text:
            return "type=space"
        safe_search_text: str = search_text.replace('"', '\\"')
        return f'type=space AND title ~ "{safe_search_text}"'
