"""Obsidian REST MCP Server

Exposes the Obsidian Local REST API plugin as Model Context Protocol tools.
"""

from obsidian_rest.client import ObsidianClient
from obsidian_rest.config import load_remote_config
from obsidian_rest.context import AppContext, create_app_context
from obsidian_rest.data_models import BatchFileResult, RemoteConfig
from obsidian_rest.errors import (
    ObsidianAPIError,
    ObsidianError,
    ObsidianTransportError,
    UnknownToolError,
)
from obsidian_rest.registry import ToolRegistry
from obsidian_rest.server import create_server, run_server

__version__ = "1.0.0"
__all__ = [
    "AppContext",
    "BatchFileResult",
    "ObsidianAPIError",
    "ObsidianClient",
    "ObsidianError",
    "ObsidianTransportError",
    "RemoteConfig",
    "ToolRegistry",
    "UnknownToolError",
    "create_app_context",
    "create_server",
    "load_remote_config",
    "run_server",
]
