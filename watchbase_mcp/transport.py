"""
Raw STDIO Transport — newline-delimited JSON-RPC

Reads from stdin, writes to stdout.
NEVER pollutes stdout with logs.
"""

import sys
import json
import asyncio
from typing import Any, Dict, Optional

from .logger import get_logger

log = get_logger("transport")


class ParseFailure:
    """Marker for a line that was read but was not valid JSON."""

    def __init__(self, raw_bytes: bytes, error: str):
        self.raw_bytes = raw_bytes
        self.error = error


class RawStdioTransport:
    """Line-oriented JSON-RPC over stdin/stdout"""

    def __init__(self, reader: Optional[asyncio.StreamReader] = None, writer=None):
        self.running = False
        self._reader = reader
        self._stdout = writer  # binary stream, synchronous writes

    async def start(self):
        """Initialize async stdin reader and direct stdout writer"""
        if self._reader is None:
            loop = asyncio.get_running_loop()
            self._reader = asyncio.StreamReader(limit=2**20)
            protocol = asyncio.StreamReaderProtocol(self._reader)
            await loop.connect_read_pipe(lambda: protocol, sys.stdin.buffer)

        # connect_write_pipe fails when stdout is not a proper pipe,
        # plain synchronous writes always work
        if self._stdout is None:
            self._stdout = sys.stdout.buffer
        self.running = True
        log.info("Transport initialized")

    async def read_message(self):
        """
        Read one JSON-RPC message from stdin.

        Returns the parsed message, a ParseFailure for a malformed line,
        or None on EOF. Blank lines are skipped.
        """
        if not self._reader:
            raise RuntimeError("Transport not started")

        while True:
            raw_bytes = await self._reader.readline()
            if not raw_bytes:
                return None  # EOF
            if raw_bytes.strip():
                break

        try:
            return json.loads(raw_bytes)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            log.error(f"JSON parse error: {exc}")
            return ParseFailure(raw_bytes, str(exc))

    async def write_message(self, message: Dict[str, Any]):
        """Write a JSON-RPC message to stdout"""
        if self._stdout is None:
            raise RuntimeError("Transport not started")

        raw_text = json.dumps(message, separators=(",", ":"), ensure_ascii=False) + "\n"
        self._stdout.write(raw_text.encode("utf-8"))
        self._stdout.flush()

    async def close(self):
        self.running = False
        log.info("Transport closed")
