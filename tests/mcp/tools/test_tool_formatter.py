"""
Tests for the tool response formatter.
"""

import json
import unittest

from say_hello.mcp.tools.formatter import ToolResponseFormatter, text_content
from say_hello.mcp.tools.models import ToolResult


class TestToolResponseFormatter(unittest.TestCase):
    def setUp(self):
        self.formatter = ToolResponseFormatter()

    def test_string_becomes_text_content(self):
        self.assertEqual(self.formatter.to_content("hi"), [{"type": "text", "text": "hi"}])

    def test_none_becomes_empty_content(self):
        self.assertEqual(self.formatter.to_content(None), [])

    def test_content_item_passes_through(self):
        item = {"type": "image", "data": "AAAA", "mimeType": "image/png"}

        self.assertEqual(self.formatter.to_content(item), [item])

    def test_content_list_passes_through(self):
        items = [text_content("a"), text_content("b")]

        self.assertEqual(self.formatter.to_content(items), items)

    def test_other_values_are_serialized_as_json(self):
        content = self.formatter.to_content({"status": "ok", "count": 2})

        self.assertEqual(len(content), 1)
        self.assertEqual(content[0]["type"], "text")
        self.assertEqual(json.loads(content[0]["text"]), {"status": "ok", "count": 2})

    def test_objects_with_to_dict_are_serialized(self):
        result = ToolResult(tool_name="x", content=[text_content("y")])

        content = self.formatter.to_content([result])

        self.assertEqual(json.loads(content[0]["text"]), [{"content": [{"type": "text", "text": "y"}], "isError": False}])

    def test_format_result(self):
        result = ToolResult(tool_name="x", success=False, error="bad")

        self.assertEqual(self.formatter.format_result(result), result.to_dict())


if __name__ == "__main__":
    unittest.main()
