"""
Server factory: builds the Say Hello MCP server with all of its capabilities.
"""

import logging
from typing import Optional

from say_hello import __version__
from say_hello.config import Config
from say_hello.health.probe import CommandProber
from say_hello.mcp.prompts import greet_prompt
from say_hello.mcp.resources import hello_world_history
from say_hello.mcp.server import MCPServer
from say_hello.mcp.tools.health_check import HealthCheckTool
from say_hello.mcp.tools.hello import HelloTool

logger = logging.getLogger(__name__)

SERVER_NAME = "Say Hello"


def create_prober(config: Optional[Config] = None) -> CommandProber:
    request = config.get_probe_request() if config is not None else None
    return CommandProber(request=request) if request is not None else CommandProber()


def create_server(config: Optional[Config] = None, prober: Optional[CommandProber] = None) -> MCPServer:
    """
    Create the MCP server and register its tools, resource and prompt.

    Args:
        config: Loaded configuration, or None for built-in defaults
        prober: Prober for the health_check tool; built from config when None

    Returns:
        The configured server
    """
    server = MCPServer(name=SERVER_NAME, version=__version__)

    server.register_tool(HelloTool.create())
    server.register_tool(HealthCheckTool.create(prober if prober is not None else create_prober(config)))
    server.register_resource(hello_world_history())
    server.register_prompt(greet_prompt())

    logger.debug(f"Registered tools: {server.tool_service.registry.list_tools()}")
    return server
