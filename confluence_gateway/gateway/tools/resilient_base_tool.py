from abc import ABCMeta
from typing import Any, Callable, Dict, List, Optional, Union

from langchain_core.tools import BaseTool
from pydantic import ValidationError
from pydantic.v1 import ValidationError as ValidationErrorV1

from confluence_gateway.gateway.utilities.case_converter import CaseConverter


def format_validation_error(error: Union[ValidationError, ValidationErrorV1]) -> str:
    """
    Turns a pydantic validation error into a short message for the caller.

    Field names are reported in camelCase since that is how callers send them.
    """
    messages: List[str] = []
    for detail in error.errors():
        location = detail.get("loc") or ()
        field_name: str = (
            CaseConverter.snake_to_camel(str(location[0])) if location else "arguments"
        )
        error_type: str = detail.get("type", "")
        if error_type in ("missing", "string_too_short"):
            messages.append(f"{field_name} is required")
        elif error_type == "string_type":
            messages.append(f"{field_name} must be a string and is required")
        elif error_type == "float_type":
            messages.append(f"{field_name} must be a number")
        elif error_type == "finite_number":
            messages.append(f"{field_name} must be a finite number")
        elif error_type == "value_error":
            messages.append(str(detail.get("ctx", {}).get("error", detail["msg"])))
        else:
            messages.append(f"{field_name}: {detail['msg']}")
    return "; ".join(messages)


class ResilientBaseTool(BaseTool, metaclass=ABCMeta):
    """
    This is a base tool that provides resilience to the tool execution.

    Input validation failures and ToolExceptions are reported back to the
    caller as error results instead of being raised.
    """

    handle_tool_error: Optional[Union[bool, str, Callable[[Any], str]]] = True
    handle_validation_error: Optional[Union[bool, str, Callable[[Any], str]]] = (
        format_validation_error
    )

    def _parse_input(
        self, tool_input: Union[str, Dict[str, Any]], tool_call_id: Optional[str]
    ) -> Union[str, dict[str, Any]]:
        """
        This function parses the input for the tool.

        Callers send camelCase parameter names (contentId) while the schemas
        use snake_case (content_id), so unknown keys are converted.

        :param tool_input: input for the tool
        :param tool_call_id: id of the tool call
        :return: input for the tool
        """
        if isinstance(tool_input, dict):
            if not self.args_schema:
                return tool_input

            # find keys that are not present in self.args_schema
            # and convert them to snake_case
            input_fields: List[str] = [c for c in self.args_schema.model_fields.keys()]  # type: ignore[union-attr]
            tool_input = {
                (
                    CaseConverter.camel_to_snake(key)
                    if key not in input_fields
                    else key
                ): value
                for key, value in tool_input.items()
            }
        return super()._parse_input(tool_input, tool_call_id)
