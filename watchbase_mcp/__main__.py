#!/usr/bin/env python3
"""
Entry point: python -m watchbase_mcp

Requires WATCHBASE_API_KEY in the environment.
"""

import asyncio
import sys

from .config import ConfigError, Settings
from .logger import get_logger
from .server import WatchBaseServer

log = get_logger("main")


async def serve(settings: Settings):
    server = WatchBaseServer(settings)
    await server.run()


def main() -> int:
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        log.error(str(exc))
        return 1

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        pass
    except Exception as exc:
        log.error(f"Server failed to start: {exc}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
