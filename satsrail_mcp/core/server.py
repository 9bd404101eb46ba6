import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from satsrail_mcp.config.schema import ServerConfig
from satsrail_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def build_server(config: ServerConfig, registry: ToolRegistry) -> Server:
    """Create the MCP server and route tool requests to the registry."""
    server = Server(config.name, version=config.version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.to_mcp_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        # Raised errors are reported to the client as tool errors by the server
        text = await registry.call_tool(name, arguments)
        return [types.TextContent(type="text", text=text)]

    return server


async def serve(server: Server) -> None:
    """Serve over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"Serving {server.name} over stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
