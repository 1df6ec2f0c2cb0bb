"""
Method Router — Dispatch MCP methods to handlers

Routes:
  initialize       → server capabilities handshake
  initialized      → notification (no response)
  tools/list       → registered tool definitions
  tools/call       → tool dispatcher
  resources/list   → empty (this server exposes no resources)
  ping             → pong
"""

from typing import Any, Dict, Optional

from .config import Config
from .dispatcher import Dispatcher
from .logger import get_logger
from .protocol import (
    initialize_result,
    tools_list_result,
    resources_list_result,
    ProtocolError,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
)

log = get_logger("router")

_NOTIFICATIONS = frozenset({
    "initialized",
    "notifications/initialized",
    "notifications/cancelled",
})


class Router:
    """MCP method dispatcher."""

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def tool_count(self) -> int:
        return len(self._dispatcher.registry)

    # ── dispatch ─────────────────────────────────────────────────

    async def route(self, msg_type: str, msg: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Route a validated message to the appropriate handler.

        Returns the result payload (to be wrapped in a JSON-RPC response),
        or None for notifications that need no response.
        """
        method = msg.get("method", "")
        params = msg.get("params")
        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise ProtocolError(INVALID_PARAMS, "params must be an object")

        if method in _NOTIFICATIONS:
            if method != "notifications/cancelled":
                self._initialized = True
            return None

        if method == "initialize":
            return self._handle_initialize(params)

        if method == "ping":
            return {}

        if method == "tools/list":
            return tools_list_result(self._dispatcher.registry.to_list())

        if method == "tools/call":
            return await self._handle_tools_call(params)

        if method == "resources/list":
            return resources_list_result([])

        raise ProtocolError(METHOD_NOT_FOUND, f"Unknown method: {method}")

    # ── handlers ─────────────────────────────────────────────────

    def _handle_initialize(self, params: Dict) -> Dict[str, Any]:
        log.info(
            f"Client initialize: {params.get('clientInfo', {}).get('name', '?')} "
            f"protocol={params.get('protocolVersion', '?')}"
        )
        return initialize_result(
            server_name=Config.SERVER_NAME,
            server_version=Config.SERVER_VERSION,
            protocol_version=Config.PROTOCOL_VERSION,
            description=Config.SERVER_DESCRIPTION,
        )

    async def _handle_tools_call(self, params: Dict) -> Dict[str, Any]:
        name = params.get("name", "")
        if not name or not isinstance(name, str):
            raise ProtocolError(INVALID_PARAMS, "Missing tool name")

        return await self._dispatcher.dispatch(name, params.get("arguments"))
