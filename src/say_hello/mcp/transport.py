"""
Stdio transport for the MCP server.

Messages are newline-delimited JSON. Each request is handled in its own task so
a slow tool call (such as a health check) does not block other requests.
"""

import json
import logging
import sys
from typing import Any, AsyncIterable, Dict, Protocol

import anyio

from say_hello.mcp.messages import INTERNAL_ERROR, PARSE_ERROR, JSONRPCError, JSONRPCMessage
from say_hello.mcp.server import MCPServer

logger = logging.getLogger(__name__)


class TextWriter(Protocol):
    async def write(self, data: str) -> Any: ...

    async def flush(self) -> Any: ...


async def serve(server: MCPServer, reader: AsyncIterable[str], writer: TextWriter) -> None:
    """
    Serve requests read from ``reader`` until it is exhausted.

    Args:
        server: The server that handles each message
        reader: Async iterable of incoming lines
        writer: Async text writer for outgoing lines
    """
    write_lock = anyio.Lock()

    async def send(message: Dict[str, Any]) -> None:
        async with write_lock:
            await writer.write(json.dumps(message) + "\n")
            await writer.flush()

    async def handle_line(line: str) -> None:
        try:
            raw = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning(f"Discarding malformed message: {e}")
            await send(JSONRPCMessage.error_response(None, JSONRPCError(PARSE_ERROR, f"Parse error: {e.msg}")).to_wire())
            return

        try:
            response = await server.handle_message(raw)
        except Exception as e:
            logger.exception("Unexpected error handling message")
            message_id = raw.get("id") if isinstance(raw, dict) else None
            error = JSONRPCError(INTERNAL_ERROR, f"Internal error: {e}")
            response = JSONRPCMessage.error_response(message_id, error).to_wire()

        if response is not None:
            await send(response)

    async with anyio.create_task_group() as tg:
        async for line in reader:
            if not line.strip():
                continue
            tg.start_soon(handle_line, line)

    logger.info("Input closed, server shutting down")


async def serve_stdio(server: MCPServer) -> None:
    """Serve the MCP protocol over this process's stdin and stdout."""
    logger.info(f"Starting {server.info.name} {server.info.version} on stdio")
    stdin = anyio.wrap_file(sys.stdin)
    stdout = anyio.wrap_file(sys.stdout)
    await serve(server, stdin, stdout)
