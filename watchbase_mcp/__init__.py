"""
WatchBase MCP Server — watch metadata from WatchBase.com over MCP

Six read-only tools (search, search_refnr, list_brands, list_families,
list_watches, get_watch_details), each forwarded as one GET to the
WatchBase data API.
"""

__version__ = "0.1.0"

from .config import Config, ConfigError, Settings
from .client import WatchBaseClient
from .dispatcher import Dispatcher
from .registry import ToolDefinition, ToolRegistry, TOOLS
from .router import Router
from .server import WatchBaseServer
