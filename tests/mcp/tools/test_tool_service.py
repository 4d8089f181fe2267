"""
Tests for the ToolService class.
"""

import unittest
from unittest.mock import AsyncMock, MagicMock

from say_hello.mcp.tools.executor import ToolExecutor
from say_hello.mcp.tools.models import Tool, ToolResult
from say_hello.mcp.tools.registry import ToolRegistry
from say_hello.mcp.tools.service import ToolService


class TestToolService(unittest.IsolatedAsyncioTestCase):
    """Test case for the ToolService class."""

    def setUp(self):
        self.service = ToolService()
        self.tool = Tool(name="echo", description="Echo", parameters=[], handler=AsyncMock(return_value="echoed"))
        self.service.register(self.tool)

    def test_init_creates_registry_and_executor(self):
        service = ToolService()

        self.assertIsInstance(service.registry, ToolRegistry)
        self.assertIsInstance(service.executor, ToolExecutor)
        self.assertIs(service.executor.registry, service.registry)

    def test_init_with_custom_executor(self):
        executor = MagicMock(spec=ToolExecutor)

        service = ToolService(ToolRegistry(), executor)

        self.assertIs(service.executor, executor)

    def test_list_tools(self):
        self.assertEqual(
            self.service.list_tools(),
            [{"name": "echo", "description": "Echo", "inputSchema": {"type": "object", "properties": {}}}],
        )

    async def test_execute_tool(self):
        result = await self.service.execute_tool("echo", {})

        self.assertIsInstance(result, ToolResult)
        self.assertEqual(result.text, "echoed")

    async def test_call_tool(self):
        response = await self.service.call_tool("echo", {})

        self.assertEqual(response, {"content": [{"type": "text", "text": "echoed"}], "isError": False})

    async def test_call_unknown_tool(self):
        response = await self.service.call_tool("missing", {})

        self.assertTrue(response["isError"])
        self.assertEqual(response["content"][0]["text"], "Tool not found: missing")

    async def test_call_tool_lets_executor_errors_through(self):
        executor = MagicMock(spec=ToolExecutor)
        executor.execute = AsyncMock(side_effect=RuntimeError("executor broke"))
        service = ToolService(ToolRegistry(), executor)

        with self.assertRaises(RuntimeError):
            await service.call_tool("echo", {})


if __name__ == "__main__":
    unittest.main()
