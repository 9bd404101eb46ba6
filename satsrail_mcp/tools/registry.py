import logging
from typing import Any

from mcp import types

from satsrail_mcp.tools.base import Tool, ToolDefinition
from satsrail_mcp.tools.validation import validate_arguments

logger = logging.getLogger(__name__)


class UnknownToolError(LookupError):
    pass


class ToolRegistry:
    """Registry for SatsRail tools with MCP schema conversion."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool. Raises ValueError if name already taken."""
        name = tool.definition.name
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        self._tools[name] = tool
        logger.info(f"Registered tool: {name}")

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def list_tools(self) -> list[ToolDefinition]:
        return [t.definition for t in self._tools.values()]

    def to_mcp_tools(self) -> list[types.Tool]:
        """Convert all tools to MCP tool descriptors."""
        return [
            types.Tool(
                name=defn.name,
                description=defn.description,
                inputSchema=defn.input_schema(),
            )
            for defn in self.list_tools()
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> str:
        """
        Validate arguments and execute a tool by name.
        Validation errors, unknown names and API failures propagate to the caller.
        """
        tool = self.get(name)
        if tool is None:
            available = list(self._tools.keys())
            raise UnknownToolError(f"Unknown tool '{name}'. Available tools: {available}")

        params = validate_arguments(tool.definition, arguments)
        logger.info(f"Calling tool '{name}' with args: {params}")
        return await tool.execute(**params)
