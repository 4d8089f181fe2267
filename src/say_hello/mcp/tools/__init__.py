"""
Tool execution framework for MCP protocol.

This module provides classes for tool registration and execution, plus the
tools this server exposes.
"""

from .executor import ToolExecutor
from .formatter import ToolResponseFormatter
from .health_check import HealthCheckTool
from .hello import HelloTool
from .models import Tool, ToolParameter, ToolResult
from .registry import ToolRegistry
from .service import ToolService
