"""
Tool executor for MCP protocol.

This module provides functionality for executing tools with argument validation.
"""

import logging
from typing import Any, Dict, Optional

import jsonschema

from say_hello.mcp.tools.formatter import ToolResponseFormatter
from say_hello.mcp.tools.models import Tool, ToolResult
from say_hello.mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolExecutor:
    """Executor for MCP tools."""

    def __init__(self, registry: ToolRegistry, formatter: Optional[ToolResponseFormatter] = None):
        """
        Initialize the tool executor.

        Args:
            registry: The tool registry to use
            formatter: Formatter used to turn handler output into content items
        """
        self.registry = registry
        self.formatter = formatter if formatter is not None else ToolResponseFormatter()

    def validate_arguments(self, tool: Tool, arguments: Dict[str, Any]) -> Optional[str]:
        """
        Validate tool arguments against the tool's input schema.

        Args:
            tool: The tool to validate arguments for
            arguments: The arguments to validate

        Returns:
            None if the arguments are valid, otherwise a description of the problem
        """
        try:
            jsonschema.validate(instance=arguments, schema=tool.input_schema)
            return None
        except jsonschema.ValidationError as e:
            error_msg = f"Invalid arguments for tool '{tool.name}': {e.message}"
            logger.error(error_msg)
            return error_msg

    async def execute(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Execute a tool with the given arguments.

        Never raises: unknown tools, invalid arguments and handler exceptions
        all come back as a failed ToolResult.

        Args:
            tool_name: The name of the tool to execute
            arguments: The arguments to pass to the tool

        Returns:
            The result of the tool execution
        """
        arguments = arguments if arguments is not None else {}
        logger.info(f"Attempting to execute tool: {tool_name}")

        if tool_name not in self.registry:
            logger.warning(f"Tool not found: {tool_name}")
            return ToolResult(tool_name=tool_name, arguments=arguments, success=False, error=f"Tool not found: {tool_name}")

        tool = self.registry.get_tool(tool_name)

        validation_error = self.validate_arguments(tool, arguments)
        if validation_error:
            return ToolResult(tool_name=tool_name, arguments=arguments, success=False, error=validation_error)

        try:
            logger.info(f"Executing tool: {tool_name}")
            value = await tool.execute(arguments)
            logger.info(f"Tool execution completed: {tool_name}")
        except Exception as e:
            logger.error(f"Error executing tool {tool_name}: {str(e)}")
            return ToolResult(tool_name=tool_name, arguments=arguments, success=False, error=str(e))

        return ToolResult(tool_name=tool_name, arguments=arguments, content=self.formatter.to_content(value))
