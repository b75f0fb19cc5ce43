"""Tool definitions and result payloads."""

import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Type

from mcp import types
from pydantic import BaseModel

from tmdb_search.models.media import ToolRequest

UNKNOWN_ERROR = "Unknown error occurred"

ToolHandler = Callable[[str, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """A named tool: its description, argument record and handler.

    The handler receives the API key and a validated instance of
    ``arguments``, and returns any pydantic model (or list of them).
    """

    name: str
    description: str
    arguments: Type[ToolRequest]
    handler: ToolHandler

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments, using their wire names."""
        return self.arguments.model_json_schema(by_alias=True)

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


def success_result(result: Any) -> types.CallToolResult:
    """Serialize a tool result as pretty-printed JSON text."""
    text = json.dumps(_to_jsonable(result), indent=2, ensure_ascii=False)
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)])


def error_result(message: str) -> types.CallToolResult:
    """Build an error-flagged tool result carrying ``message``."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=message or UNKNOWN_ERROR)],
        isError=True,
    )
