"""
Say Hello: a small MCP server with a Gemini CLI health check.
"""

__version__ = "1.0.0"
