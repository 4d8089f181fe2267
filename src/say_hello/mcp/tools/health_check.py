"""
Health check tool for MCP protocol.

Runs the Gemini CLI with a trivial prompt and reports whether it answered.
"""

import logging
from typing import Any, Dict, Optional

from say_hello.health.probe import CommandProber
from say_hello.health.report import format_failure, format_probe_result
from say_hello.mcp.tools.models import Tool

logger = logging.getLogger(__name__)


def make_health_check_handler(prober: CommandProber):
    """
    Build the health_check handler around a prober.

    The handler always returns response text; no exception escapes it.
    """

    async def health_check_handler(parameters: Dict[str, Any]) -> str:
        try:
            result = await prober.probe()
        except Exception as e:
            logger.exception("Unexpected error during health check")
            return format_failure(str(e) or type(e).__name__)

        return format_probe_result(result)

    return health_check_handler


class HealthCheckTool:
    """Tool that checks the Gemini CLI is installed and responding."""

    @staticmethod
    def create(prober: Optional[CommandProber] = None) -> Tool:
        """
        Create the health_check tool.

        Args:
            prober: The prober to run, or None for the default Gemini request

        Returns:
            A Tool instance with an empty input schema
        """
        return Tool(
            name="health_check",
            title="Health Check",
            description="Check Gemini CLI health by running a simple test",
            parameters=[],
            handler=make_health_check_handler(prober if prober is not None else CommandProber()),
        )
