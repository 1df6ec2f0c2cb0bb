"""
Error classification for tool calls.

Maps whatever a tool call raised onto the protocol error taxonomy:

  ProtocolError              → Rethrow (surfaces as a JSON-RPC error)
  upstream 401/403           → INTERNAL_ERROR  (bad API key)
  upstream 404               → INVALID_REQUEST (resource not found)
  upstream 400               → INVALID_PARAMS  (bad request)
  other status / no response → INTERNAL_ERROR
  anything else              → INTERNAL_ERROR  (generic)
"""

from dataclasses import dataclass
from typing import Optional, Union

import httpx

from .protocol import (
    ProtocolError,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
)

API_ERROR_PREFIX = "WatchBase API error"


@dataclass(frozen=True)
class ClassifiedFailure:
    """A failure reported to the caller inside an error envelope."""
    code: int
    message: str


@dataclass(frozen=True)
class Rethrow:
    """A protocol failure that must propagate unchanged."""
    error: ProtocolError


Classification = Union[ClassifiedFailure, Rethrow]


def upstream_error_text(response: Optional[httpx.Response]) -> Optional[str]:
    """The "error" field of an upstream JSON body, if there is one."""
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


def _classify_status(exc: httpx.HTTPStatusError) -> ClassifiedFailure:
    response = exc.response
    status = response.status_code
    error_text = upstream_error_text(response)

    if status in (401, 403):
        return ClassifiedFailure(
            INTERNAL_ERROR,
            f"{API_ERROR_PREFIX}: Invalid or unauthorized API key. Status: {status}",
        )
    if status == 404:
        return ClassifiedFailure(
            INVALID_REQUEST,
            f"{API_ERROR_PREFIX}: Resource not found. Status: 404",
        )
    if status == 400:
        message = f"{API_ERROR_PREFIX}: Bad request (check parameters). Status: 400."
        if error_text:
            message = f"{message} {error_text}"
        return ClassifiedFailure(INVALID_PARAMS, message)

    detail = error_text or response.reason_phrase or str(exc)
    return ClassifiedFailure(INTERNAL_ERROR, f"{API_ERROR_PREFIX}: {detail}")


def _classify_transport(exc: httpx.RequestError) -> ClassifiedFailure:
    # No response at all: connection failure, DNS, timeout, ...
    detail = str(exc) or type(exc).__name__
    return ClassifiedFailure(INTERNAL_ERROR, f"{API_ERROR_PREFIX}: {detail}")


def classify_failure(tool_name: str, exc: BaseException) -> Classification:
    """Decide how a failure raised while running `tool_name` is reported."""
    if isinstance(exc, ProtocolError):
        return Rethrow(exc)
    if isinstance(exc, httpx.HTTPStatusError):
        return _classify_status(exc)
    if isinstance(exc, httpx.RequestError):
        return _classify_transport(exc)
    return ClassifiedFailure(INTERNAL_ERROR, f"Failed to execute tool {tool_name}.")
