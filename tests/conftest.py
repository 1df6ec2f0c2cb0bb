"""Shared fixtures: settings, a recording fake of the WatchBase API."""

import os
import tempfile

# Must happen before watchbase_mcp is imported: Config reads it at import time
os.environ.setdefault(
    "WATCHBASE_MCP_LOG_DIR", tempfile.mkdtemp(prefix="watchbase-mcp-logs-")
)

import httpx
import pytest

from watchbase_mcp.client import WatchBaseClient
from watchbase_mcp.config import Settings
from watchbase_mcp.dispatcher import Dispatcher
from watchbase_mcp.registry import ToolRegistry


def pytest_configure(config):
    config.addinivalue_line("markers", "asyncio: mark test as async")


class FakeUpstream:
    """httpx handler that records every request and answers via `respond`."""

    def __init__(self, respond=None):
        self.requests = []
        self._respond = respond or (lambda request: httpx.Response(200, json={}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings():
    return Settings(api_key="test-key")


@pytest.fixture
def make_dispatcher(settings):
    """Build a Dispatcher whose client talks to a FakeUpstream."""

    def _make(respond=None):
        upstream = FakeUpstream(respond)
        client = WatchBaseClient(settings, transport=httpx.MockTransport(upstream))
        return Dispatcher(ToolRegistry(), client), upstream

    return _make
