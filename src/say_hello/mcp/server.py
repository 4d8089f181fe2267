"""
MCP server: dispatches JSON-RPC requests to tools, resources and prompts.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from say_hello.mcp.messages import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    LATEST_PROTOCOL_VERSION,
    METHOD_NOT_FOUND,
    SUPPORTED_PROTOCOL_VERSIONS,
    InitializeResult,
    JSONRPCError,
    JSONRPCMessage,
    MessageMethod,
    ServerCapabilities,
    ServerInfo,
)
from say_hello.mcp.prompts import Prompt, PromptRegistry
from say_hello.mcp.resources import Resource, ResourceRegistry
from say_hello.mcp.tools.models import Tool
from say_hello.mcp.tools.service import ToolService

logger = logging.getLogger(__name__)


class MCPServer:
    """A minimal MCP server holding tools, resources and prompts."""

    def __init__(self, name: str, version: str, tool_service: Optional[ToolService] = None):
        self.info = ServerInfo(name=name, version=version)
        self.tool_service = tool_service if tool_service is not None else ToolService()
        self.resources = ResourceRegistry()
        self.prompts = PromptRegistry()
        self._handlers = {
            MessageMethod.INITIALIZE: self._initialize,
            MessageMethod.PING: self._ping,
            MessageMethod.TOOLS_LIST: self._list_tools,
            MessageMethod.TOOLS_CALL: self._call_tool,
            MessageMethod.RESOURCES_LIST: self._list_resources,
            MessageMethod.RESOURCES_READ: self._read_resource,
            MessageMethod.PROMPTS_LIST: self._list_prompts,
            MessageMethod.PROMPTS_GET: self._get_prompt,
        }

    def register_tool(self, tool: Tool) -> None:
        self.tool_service.register(tool)

    def register_resource(self, resource: Resource) -> None:
        self.resources.register(resource)

    def register_prompt(self, prompt: Prompt) -> None:
        self.prompts.register(prompt)

    async def handle_message(self, raw: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Handle one decoded JSON-RPC message.

        Args:
            raw: The decoded JSON object

        Returns:
            The response to send, or None for notifications
        """
        try:
            message = JSONRPCMessage.model_validate(raw)
        except ValidationError as e:
            message_id = raw.get("id") if isinstance(raw, dict) else None
            error = JSONRPCError(INVALID_REQUEST, f"Invalid request: {e.errors()[0]['msg']}")
            return JSONRPCMessage.error_response(message_id, error).to_wire()

        if message.jsonrpc != JSONRPC_VERSION or message.method is None:
            if message.method is None and (message.result is not None or message.error is not None):
                # Responses from the client are not expected; ignore them.
                return None
            return JSONRPCMessage.error_response(message.id, JSONRPCError(INVALID_REQUEST, "Invalid request")).to_wire()

        if message.is_notification:
            logger.debug(f"Received notification: {message.method}")
            return None

        try:
            result = await self.dispatch(message.method, message.params or {})
        except JSONRPCError as e:
            logger.warning(f"Request {message.method} failed: {e.message}")
            return JSONRPCMessage.error_response(message.id, e).to_wire()
        except Exception as e:
            logger.exception(f"Unexpected error handling {message.method}")
            error = JSONRPCError(INTERNAL_ERROR, f"Internal error: {e}")
            return JSONRPCMessage.error_response(message.id, error).to_wire()

        return JSONRPCMessage.response(message.id, result).to_wire()

    async def dispatch(self, method: str, params: Dict[str, Any]) -> Any:
        handler = self._handlers.get(method)
        if handler is None:
            raise JSONRPCError(METHOD_NOT_FOUND, f"Method not found: {method}")
        return await handler(params)

    async def _initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        requested = params.get("protocolVersion")
        version = requested if requested in SUPPORTED_PROTOCOL_VERSIONS else LATEST_PROTOCOL_VERSION
        client = params.get("clientInfo", {})
        logger.info(f"Initializing session with {client.get('name', 'unknown client')} (protocol {version})")

        result = InitializeResult(
            protocolVersion=version,
            capabilities=ServerCapabilities(tools={}, resources={}, prompts={}),
            serverInfo=self.info,
        )
        return result.model_dump(exclude_none=True)

    async def _ping(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    async def _list_tools(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"tools": self.tool_service.list_tools()}

    async def _call_tool(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params.get("name")
        if not isinstance(name, str):
            raise JSONRPCError(INVALID_PARAMS, "Missing tool name")
        arguments = params.get("arguments") or {}
        if not isinstance(arguments, dict):
            raise JSONRPCError(INVALID_PARAMS, "Tool arguments must be an object")
        return await self.tool_service.call_tool(name, arguments)

    async def _list_resources(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"resources": self.resources.get_definitions()}

    async def _read_resource(self, params: Dict[str, Any]) -> Dict[str, Any]:
        uri = params.get("uri")
        try:
            return self.resources.get(uri).read()
        except KeyError:
            raise JSONRPCError(INVALID_PARAMS, f"Unknown resource: {uri}") from None

    async def _list_prompts(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"prompts": self.prompts.get_definitions()}

    async def _get_prompt(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params.get("name")
        try:
            prompt = self.prompts.get(name)
        except KeyError:
            raise JSONRPCError(INVALID_PARAMS, f"Unknown prompt: {name}") from None

        try:
            return prompt.get(params.get("arguments"))
        except ValueError as e:
            raise JSONRPCError(INVALID_PARAMS, str(e)) from e
