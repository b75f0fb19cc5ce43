"""Tool registry mapping tool names to TMDB lookups."""

import logging
from typing import Any, Dict, List, Optional

from mcp import types
from pydantic import ValidationError

from tmdb_search.services.tmdb import TMDBError
from tmdb_search.tools.base import ToolDefinition, error_result, success_result

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry of the tools served to MCP clients.

    Tools are registered once at startup. Calls never raise: every failure
    is turned into an error-flagged ``CallToolResult``.
    """

    def __init__(self, api_key: str):
        self._api_key = api_key
        self._tools: Dict[str, ToolDefinition] = {}

    def register(self, tool: ToolDefinition) -> None:
        """Register a tool definition."""
        self._tools[tool.name] = tool

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def all(self) -> List[ToolDefinition]:
        """Get all registered tools."""
        return list(self._tools.values())

    def names(self) -> List[str]:
        """Get names of all registered tools."""
        return list(self._tools.keys())

    async def call(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> types.CallToolResult:
        """Validate ``arguments``, run the tool and serialize its result."""
        tool = self.get(name)
        if tool is None:
            logger.warning("Call to unknown tool '%s'", name)
            return error_result(f"Unknown tool: {name}")

        try:
            request = tool.arguments.model_validate(arguments or {})
        except ValidationError as exc:
            logger.error("Invalid arguments for tool '%s': %s", name, exc)
            return error_result(str(exc))

        try:
            result = await tool.handler(self._api_key, request)
            return success_result(result)
        except TMDBError as exc:
            logger.error("Tool '%s' failed: %s", name, exc)
            return error_result(str(exc))
        except Exception as exc:
            logger.exception("Unexpected error in tool '%s'", name)
            return error_result(str(exc))


def build_registry(api_key: str) -> ToolRegistry:
    """Create a registry holding every TMDB tool."""
    from tmdb_search.tools.tmdb_tools import TMDB_TOOLS

    registry = ToolRegistry(api_key)
    for tool in TMDB_TOOLS:
        registry.register(tool)
    return registry
