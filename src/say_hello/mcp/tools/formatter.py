"""
Tool response formatter for MCP protocol.

Handlers may return a string, a single content item, a list of content items
or any JSON-serializable value. The formatter turns all of them into a list of
MCP content items.
"""

import json
from typing import Any, Dict, List

from say_hello.mcp.tools.models import ToolResult

CONTENT_TYPES = ("text", "image", "audio", "resource", "resource_link")


def text_content(text: str) -> Dict[str, Any]:
    return {"type": "text", "text": text}


class ToolResponseFormatter:
    """Formatter for MCP tool responses."""

    def to_content(self, value: Any) -> List[Dict[str, Any]]:
        """
        Convert a handler return value to MCP content items.

        Args:
            value: The value returned by a tool handler

        Returns:
            A list of content items
        """
        if value is None:
            return []

        if isinstance(value, str):
            return [text_content(value)]

        if self._is_content_item(value):
            return [value]

        if isinstance(value, (list, tuple)) and value and all(self._is_content_item(item) for item in value):
            return list(value)

        return [text_content(json.dumps(self._prepare_for_json(value), indent=2))]

    def format_result(self, result: ToolResult) -> Dict[str, Any]:
        """Format a tool result as a ``tools/call`` response payload."""
        return result.to_dict()

    @staticmethod
    def _is_content_item(value: Any) -> bool:
        return isinstance(value, dict) and value.get("type") in CONTENT_TYPES

    def _prepare_for_json(self, value: Any) -> Any:
        if hasattr(value, "to_dict") and callable(value.to_dict):
            return value.to_dict()

        if isinstance(value, (list, tuple)):
            return [self._prepare_for_json(item) for item in value]
        if isinstance(value, dict):
            return {k: self._prepare_for_json(v) for k, v in value.items()}

        if hasattr(value, "__dict__"):
            return value.__dict__

        return value
