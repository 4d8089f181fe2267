"""
Greeting tool for MCP protocol.
"""

from typing import Any, Dict

from say_hello.mcp.tools.models import Tool, ToolParameter


async def hello_handler(parameters: Dict[str, Any]) -> str:
    """
    Greet someone by name.

    Args:
        parameters: Dictionary containing:
            name: Name to greet

    Returns:
        The greeting text

    Raises:
        ValueError: If no name is given
    """
    name = parameters.get("name")
    if name is None:
        raise ValueError("Name parameter is required")

    return f"Hello, {name}!"


class HelloTool:
    """Tool that says hello to someone."""

    @staticmethod
    def create() -> Tool:
        return Tool(
            name="hello",
            title="Hello Tool",
            description="Say hello to someone",
            parameters=[ToolParameter(name="name", description="Name to greet", type="string", required=True)],
            handler=hello_handler,
        )
