"""
JSON-RPC 2.0 / MCP message helpers

Builds and validates the wire-level shapes exchanged over stdio:
  requests, notifications, responses, errors, and the MCP result
  payloads for initialize, tools/list, and tools/call.
"""

from typing import Any, Dict, List, Optional

JSONRPC_VERSION = "2.0"

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """A protocol-level failure that surfaces as a JSON-RPC error response."""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def __repr__(self):
        return f"ProtocolError(code={self.code}, message={self.message!r})"


# ── validation ───────────────────────────────────────────────────

def validate_message(msg: Any) -> str:
    """
    Classify a parsed JSON-RPC message.

    Returns one of "request", "notification", "response", "error".
    Raises ProtocolError(INVALID_REQUEST) for anything else.
    """
    if not isinstance(msg, dict):
        raise ProtocolError(INVALID_REQUEST, "Message must be a JSON object")

    if msg.get("jsonrpc") != JSONRPC_VERSION:
        raise ProtocolError(INVALID_REQUEST, "Missing or invalid jsonrpc version")

    if "method" in msg:
        if not isinstance(msg["method"], str) or not msg["method"]:
            raise ProtocolError(INVALID_REQUEST, "Method must be a non-empty string")
        return "request" if "id" in msg else "notification"

    if "id" in msg:
        if "error" in msg:
            return "error"
        if "result" in msg:
            return "response"

    raise ProtocolError(INVALID_REQUEST, "Message is neither a request nor a response")


# ── envelopes ────────────────────────────────────────────────────

def make_response(request_id: Any, result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def make_error(
    request_id: Any,
    code: int,
    message: str,
    data: Any = None,
) -> Dict[str, Any]:
    error: Dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error}


# ── MCP results ──────────────────────────────────────────────────

def initialize_result(
    server_name: str,
    server_version: str,
    protocol_version: str,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    server_info: Dict[str, Any] = {"name": server_name, "version": server_version}
    if description:
        server_info["description"] = description
    return {
        "protocolVersion": protocol_version,
        "capabilities": {
            "tools": {},
            "resources": {},
        },
        "serverInfo": server_info,
    }


def tools_list_result(tools: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"tools": tools}


def resources_list_result(resources: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"resources": resources}


def text_content(text: str) -> Dict[str, str]:
    return {"type": "text", "text": text}


def tool_result_content(
    content: List[Dict[str, Any]],
    is_error: bool = False,
    error_code: Optional[int] = None,
) -> Dict[str, Any]:
    """Wrap content entries as a tools/call result envelope."""
    if not content:
        raise ValueError("A tool result needs at least one content entry")
    result: Dict[str, Any] = {"content": content}
    if is_error:
        result["isError"] = True
        if error_code is not None:
            result["errorCode"] = error_code
    return result
