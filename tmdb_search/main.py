"""MCP server entry point for tmdb-search."""

import logging
import sys

import anyio
from dotenv import load_dotenv
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from tmdb_search.core.config import Settings, get_settings
from tmdb_search.services import tmdb
from tmdb_search.tools import ToolRegistry, build_registry

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def create_server(registry: ToolRegistry, name: str = "tmdb-search") -> Server:
    """Build an MCP server that lists and dispatches the registry's tools."""
    server = Server(name, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [tool.to_mcp_tool() for tool in registry.all()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> types.CallToolResult:
        return await registry.call(name, arguments)

    return server


async def serve(settings: Settings) -> None:
    """Serve the TMDB tools over stdio until the client disconnects."""
    tmdb.configure(settings.tmdb_api_key)
    registry = build_registry(settings.tmdb_api_key)
    server = create_server(registry, settings.server_name)

    logger.info(
        "Starting %s %s with tools: %s",
        settings.server_name,
        __version__,
        ", ".join(registry.names()),
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )


def configure_logging(level: str) -> None:
    # stdout carries the MCP protocol
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging("ERROR")
        if any(error["loc"] == ("tmdb_api_key",) for error in exc.errors()):
            logger.error("TMDB_API_KEY environment variable is not set")
        else:
            logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    configure_logging(settings.effective_log_level)

    try:
        anyio.run(serve, settings)
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
