"""
WatchBase MCP Server — Main Orchestrator

Ties together:
  Transport → Protocol → Router → Dispatcher → WatchBase API

Flow:
  1. Transport reads one JSON line from stdin
  2. Protocol validates JSON-RPC 2.0
  3. Router dispatches to the correct handler
  4. tools/call runs as its own task so slow upstream calls overlap
  5. Transport writes the response to stdout
"""

import asyncio
import signal
from typing import Any, List, Optional, Set

from .client import WatchBaseClient
from .config import Config, Settings
from .dispatcher import Dispatcher
from .logger import get_logger
from .protocol import (
    validate_message,
    make_response,
    make_error,
    ProtocolError,
    PARSE_ERROR,
    INTERNAL_ERROR,
)
from .registry import ToolRegistry
from .router import Router
from .transport import ParseFailure, RawStdioTransport

log = get_logger("server")


class WatchBaseServer:
    """
    Main server orchestrator.

    Usage:
        server = WatchBaseServer(Settings.from_env())
        await server.run()
    """

    def __init__(
        self,
        settings: Settings,
        *,
        registry: Optional[ToolRegistry] = None,
        client: Optional[WatchBaseClient] = None,
        transport: Optional[RawStdioTransport] = None,
    ):
        self._settings = settings
        self._registry = registry if registry is not None else ToolRegistry()
        self._client = client or WatchBaseClient(settings)
        self._dispatcher = Dispatcher(self._registry, self._client)
        self._router = Router(self._dispatcher)
        self._transport = transport or RawStdioTransport()
        self._pending: Set[asyncio.Task] = set()
        self._main_task: Optional[asyncio.Task] = None
        self._signals: List[int] = []
        self._running = False

    @property
    def router(self) -> Router:
        return self._router

    # ── main loop ────────────────────────────────────────────────

    async def run(self):
        """Start the server and process messages until EOF or signal."""
        log.info(f"Starting {Config.SERVER_NAME} v{Config.SERVER_VERSION}")

        await self._transport.start()
        self._main_task = asyncio.current_task()

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self._on_signal)
                self._signals.append(sig)
            except (NotImplementedError, RuntimeError):
                pass  # Windows, or not on the main thread

        self._running = True
        log.info("WatchBase MCP server running on stdio")

        try:
            while self._running:
                msg = await self._transport.read_message()
                if msg is None:
                    log.info("EOF on stdin, shutting down")
                    break

                if isinstance(msg, ParseFailure):
                    await self._transport.write_message(
                        make_error(None, PARSE_ERROR, f"Parse error: {msg.error}")
                    )
                    continue

                if isinstance(msg, dict) and msg.get("method") == "tools/call":
                    task = asyncio.create_task(self.handle_message(msg))
                    self._pending.add(task)
                    task.add_done_callback(self._pending.discard)
                else:
                    await self.handle_message(msg)

        except asyncio.CancelledError:
            log.info("Server cancelled")
        except Exception as exc:
            log.error(f"Server error: {exc}", exc_info=True)
        finally:
            for sig in self._signals:
                loop.remove_signal_handler(sig)
            self._signals.clear()
            # In-flight calls answer before the client is closed
            if self._pending:
                await asyncio.gather(*self._pending, return_exceptions=True)
            await self.shutdown()

    def _on_signal(self):
        log.info("Signal received, stopping")
        self._running = False
        if self._main_task and not self._main_task.done():
            self._main_task.cancel()

    async def handle_message(self, msg: Any):
        """Process a single JSON-RPC message and write any response."""
        request_id = msg.get("id") if isinstance(msg, dict) else None

        try:
            msg_type = validate_message(msg)
            if msg_type in ("response", "error"):
                return  # this server never issues requests

            result = await self._router.route(msg_type, msg)

            # Notifications get no response
            if result is None or msg_type == "notification":
                return

            await self._transport.write_message(make_response(request_id, result))

        except ProtocolError as exc:
            log.warning(f"Protocol error: {exc.message} (code={exc.code})")
            if request_id is not None:
                await self._transport.write_message(
                    make_error(request_id, exc.code, exc.message, exc.data)
                )

        except Exception as exc:
            log.error(f"Unhandled error: {exc}", exc_info=True)
            if request_id is not None:
                await self._transport.write_message(
                    make_error(request_id, INTERNAL_ERROR, str(exc))
                )

    async def shutdown(self):
        """Graceful shutdown — close transport and HTTP client."""
        if not self._running and not self._transport.running:
            return
        self._running = False

        await self._transport.close()
        await self._client.close()

        log.info("Server stopped")
