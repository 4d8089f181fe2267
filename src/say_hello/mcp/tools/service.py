"""
Tool service for MCP protocol.

This module provides the facade the server uses for ``tools/list`` and
``tools/call``.
"""

from typing import Any, Dict, List, Optional

from say_hello.mcp.tools.executor import ToolExecutor
from say_hello.mcp.tools.formatter import ToolResponseFormatter
from say_hello.mcp.tools.models import Tool, ToolResult
from say_hello.mcp.tools.registry import ToolRegistry


class ToolService:
    """Service for executing tools through the MCP protocol."""

    def __init__(self, registry: Optional[ToolRegistry] = None, executor: Optional[ToolExecutor] = None):
        """
        Initialize the tool service.

        Args:
            registry: The tool registry to use, or None to create an empty one
            executor: The tool executor to use, or None to create a new one
        """
        self.registry = registry if registry is not None else ToolRegistry()
        self.formatter = ToolResponseFormatter()
        self.executor = executor if executor is not None else ToolExecutor(self.registry, self.formatter)

    def register(self, tool: Tool) -> None:
        self.registry.register(tool)

    def list_tools(self) -> List[Dict[str, Any]]:
        """Get definitions for all available tools."""
        return self.registry.get_definitions()

    async def execute_tool(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        return await self.executor.execute(tool_name, arguments)

    async def call_tool(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a tool and format the result for a ``tools/call`` response.

        Args:
            tool_name: The name of the tool to execute
            arguments: The arguments to pass to the tool

        Returns:
            The ``tools/call`` result payload
        """
        result = await self.execute_tool(tool_name, arguments)
        return self.formatter.format_result(result)
