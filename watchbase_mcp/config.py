"""Configuration for the WatchBase MCP server"""

import os
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Raised when required process configuration is missing."""


class Config:
    # Server identity
    SERVER_NAME = "watchbase-mcp"
    SERVER_VERSION = "0.1.0"
    SERVER_DESCRIPTION = (
        "Structured and standardized querying of watch-related metadata such as "
        "brands families and reference details from WatchBase.com"
    )
    PROTOCOL_VERSION = "2024-11-05"

    # Paths
    HOME_DIR = Path.home() / ".watchbase-mcp"
    LOG_DIR = Path(os.environ.get("WATCHBASE_MCP_LOG_DIR", str(HOME_DIR / "logs")))

    # Logging (NEVER to stdout)
    LOG_FILE = LOG_DIR / "watchbase-mcp.log"
    ERROR_LOG = LOG_DIR / "watchbase-errors.log"

    @classmethod
    def ensure_dirs(cls):
        """Create required directories"""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


# Upstream defaults
DEFAULT_BASE_URL = "https://api.watchbase.com/v1/"
DEFAULT_TIMEOUT = 15.0
DEFAULT_FORMAT = "json"


@dataclass(frozen=True)
class Settings:
    """Upstream API settings, built once at startup and shared read-only."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    response_format: str = DEFAULT_FORMAT

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        api_key = env.get("WATCHBASE_API_KEY", "")
        if not api_key:
            raise ConfigError("WATCHBASE_API_KEY environment variable is required")
        base_url = env.get("WATCHBASE_API_BASE_URL") or DEFAULT_BASE_URL
        if not base_url.endswith("/"):
            base_url += "/"
        return cls(api_key=api_key, base_url=base_url)
