"""
Tool Dispatcher — runs one tools/call end to end

  received → resolved → validated → translated → upstream-called
           → succeeded | failed

Unknown tools and bad arguments raise ProtocolError before any network
I/O. Everything past that point is classified and returned as an
error envelope.
"""

import json
from typing import Any, Dict

from .arguments import validate_arguments
from .client import WatchBaseClient
from .errors import Rethrow, classify_failure
from .logger import get_logger
from .protocol import (
    ProtocolError,
    METHOD_NOT_FOUND,
    text_content,
    tool_result_content,
)
from .registry import ToolRegistry
from .translator import translate

log = get_logger("dispatcher")


def format_payload(payload: Any) -> str:
    """Pretty-print an upstream JSON body for a text content entry."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


class Dispatcher:
    """Routes a tool call through validation, translation and the API."""

    def __init__(self, registry: ToolRegistry, client: WatchBaseClient):
        self._registry = registry
        self._client = client

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def dispatch(self, name: str, arguments: Any) -> Dict[str, Any]:
        try:
            if name not in self._registry:
                raise ProtocolError(METHOD_NOT_FOUND, f"Unknown tool: {name}")

            validated = validate_arguments(name, arguments)
            request = translate(name, validated)
            payload = await self._client.fetch(request)

        except Exception as exc:
            outcome = classify_failure(name, exc)
            if isinstance(outcome, Rethrow):
                log.warning(f"Tool {name} rejected: {outcome.error.message}")
                raise outcome.error

            log.error(f"Error calling tool {name}: {exc!r}")
            return tool_result_content(
                [text_content(outcome.message)],
                is_error=True,
                error_code=outcome.code,
            )

        log.info(f"Tool {name} ok ({request.path})")
        return tool_result_content([text_content(format_payload(payload))])
