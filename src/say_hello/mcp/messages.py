"""
JSON-RPC message models for the MCP server.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

JSONRPC_VERSION = "2.0"

LATEST_PROTOCOL_VERSION = "2025-06-18"
SUPPORTED_PROTOCOL_VERSIONS = ("2024-11-05", "2025-03-26", "2025-06-18")

# JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class MessageMethod:
    INITIALIZE = "initialize"
    INITIALIZED = "notifications/initialized"
    PING = "ping"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    RESOURCES_LIST = "resources/list"
    RESOURCES_READ = "resources/read"
    PROMPTS_LIST = "prompts/list"
    PROMPTS_GET = "prompts/get"


class JSONRPCError(Exception):
    """Error that is reported to the client as a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        error = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


def response_id(raw_id: Any) -> Optional[Union[int, str]]:
    """Id to echo in a response; anything that is not a valid request id becomes null."""
    if isinstance(raw_id, (int, str)) and not isinstance(raw_id, bool):
        return raw_id
    return None


class JSONRPCMessage(BaseModel):
    """A JSON-RPC 2.0 request, notification or response."""

    model_config = ConfigDict(extra="allow")

    jsonrpc: str = JSONRPC_VERSION
    id: Optional[Union[int, str]] = None
    method: Optional[str] = None
    params: Optional[Dict[str, Any]] = None
    result: Optional[Any] = None
    error: Optional[Dict[str, Any]] = None

    @property
    def is_notification(self) -> bool:
        return self.method is not None and self.id is None

    @classmethod
    def response(cls, message_id: Union[int, str], result: Any) -> "JSONRPCMessage":
        return cls(id=message_id, result=result)

    @classmethod
    def error_response(cls, message_id: Any, error: JSONRPCError) -> "JSONRPCMessage":
        return cls(id=response_id(message_id), error=error.to_dict())

    def to_wire(self) -> Dict[str, Any]:
        """Dump the message for sending, keeping ``id`` on responses even when null."""
        data = self.model_dump(exclude_none=True)
        if self.method is None:
            data["id"] = self.id
            if self.error is None:
                data["result"] = self.result if self.result is not None else {}
        return data


class ServerInfo(BaseModel):
    name: str
    version: str


class ServerCapabilities(BaseModel):
    prompts: Optional[Dict[str, Any]] = None
    resources: Optional[Dict[str, Any]] = None
    tools: Optional[Dict[str, Any]] = None


class InitializeResult(BaseModel):
    protocolVersion: str
    capabilities: ServerCapabilities
    serverInfo: ServerInfo
    instructions: Optional[str] = None
