"""Application context wiring config, client and tool registry together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from obsidian_rest.client import ObsidianClient
from obsidian_rest.data_models import RemoteConfig
from obsidian_rest.registry import ToolRegistry
from obsidian_rest.tools import build_handlers


@dataclass(frozen=True)
class AppContext:
    """Everything a running server needs, built once at startup."""

    config: RemoteConfig
    client: ObsidianClient
    registry: ToolRegistry


def create_app_context(
    config: RemoteConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AppContext:
    """Build the client and tool registry for ``config``.

    Args:
        config: Connection settings for the Local REST API.
        transport: Optional httpx transport, mainly for tests.
    """
    client = ObsidianClient(config, transport=transport)
    registry = ToolRegistry(build_handlers(client))
    return AppContext(config=config, client=client, registry=registry)
