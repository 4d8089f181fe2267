"""
Name-to-tool lookup for the tools a server exposes.
"""

from typing import Any, Dict, List

from say_hello.mcp.tools.models import Tool


class ToolRegistry:
    """Tools keyed by name; ``tools/list`` reports them in registration order."""

    def __init__(self):
        self._tools: Dict[str, Tool] = {}

    def __contains__(self, tool_name: str) -> bool:
        return tool_name in self._tools

    def register(self, tool: Tool) -> None:
        """Add ``tool``; a second tool under the same name is a ValueError."""
        if tool.name in self._tools:
            raise ValueError(f"Tool with name '{tool.name}' is already registered")

        self._tools[tool.name] = tool

    def get_tool(self, tool_name: str) -> Tool:
        if tool_name not in self._tools:
            raise ValueError(f"No tool with name '{tool_name}' is registered")

        return self._tools[tool_name]

    def list_tools(self) -> List[str]:
        return list(self._tools)

    def get_definitions(self) -> List[Dict[str, Any]]:
        return [tool.to_definition() for tool in self._tools.values()]
