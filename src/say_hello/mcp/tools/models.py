"""
Tool models for the MCP protocol.

This module provides data models for tools exposed by the server.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional


@dataclass
class ToolParameter:
    """Parameter definition for a tool."""

    name: str
    description: str
    type: str
    required: bool = False
    enum: Optional[List[Any]] = None

    def to_schema(self) -> Dict[str, Any]:
        """Convert parameter to JSON Schema."""
        schema = {"type": self.type, "description": self.description}

        if self.enum is not None:
            schema["enum"] = self.enum

        return schema


@dataclass
class Tool:
    """Tool definition for MCP protocol."""

    name: str
    description: str
    parameters: List[ToolParameter]
    handler: Callable[[Dict[str, Any]], Awaitable[Any]]
    title: Optional[str] = None

    def __post_init__(self):
        """Generate the input schema from the parameters."""
        self._input_schema = self._generate_input_schema()

    def _generate_input_schema(self) -> Dict[str, Any]:
        properties = {}
        required = []

        for param in self.parameters:
            properties[param.name] = param.to_schema()
            if param.required:
                required.append(param.name)

        schema = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    @property
    def input_schema(self) -> Dict[str, Any]:
        """Get the JSON Schema for the tool arguments."""
        return self._input_schema

    def to_definition(self) -> Dict[str, Any]:
        """Convert the tool to the shape returned by ``tools/list``."""
        definition = {"name": self.name, "description": self.description, "inputSchema": self.input_schema}
        if self.title:
            definition["title"] = self.title
        return definition

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        """
        Execute the tool with the given arguments.

        Args:
            arguments: Arguments to pass to the handler

        Returns:
            The result of the tool execution
        """
        return await self.handler(arguments)


@dataclass
class ToolResult:
    """Result of a tool execution."""

    tool_name: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    content: List[Dict[str, Any]] = field(default_factory=list)
    success: bool = True
    error: Optional[str] = None

    @property
    def text(self) -> str:
        """Concatenated text of all text content items."""
        return "".join(item.get("text", "") for item in self.content if item.get("type") == "text")

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to the shape returned by ``tools/call``."""
        content = self.content
        if not self.success and not content:
            content = [{"type": "text", "text": self.error or "Tool execution failed"}]
        return {"content": content, "isError": not self.success}
