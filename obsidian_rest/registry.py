"""Tool dispatch: name lookup and invocation."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from mcp.types import TextContent, Tool

from obsidian_rest.errors import UnknownToolError
from obsidian_rest.tools import ToolHandler

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Immutable mapping from tool name to handler.

    Built once from the handler catalog; handlers cannot be added afterwards.
    """

    def __init__(self, handlers: Iterable[ToolHandler]) -> None:
        registered: dict[str, ToolHandler] = {}
        for handler in handlers:
            if handler.name in registered:
                raise ValueError(f"Duplicate tool name '{handler.name}'")
            registered[handler.name] = handler
        self._handlers: Mapping[str, ToolHandler] = MappingProxyType(registered)

    @property
    def names(self) -> list[str]:
        return list(self._handlers)

    def get_handler(self, name: str) -> ToolHandler:
        """Look up a handler by tool name.

        Raises:
            UnknownToolError: If no tool is registered under ``name``.
        """
        try:
            return self._handlers[name]
        except KeyError as exc:
            raise UnknownToolError(name) from exc

    def get_tools(self) -> list[Tool]:
        return [handler.get_tool_description() for handler in self._handlers.values()]

    async def run_tool(self, name: str, args: Optional[Mapping[str, Any]] = None) -> list[TextContent]:
        """Validate ``args`` and run the named tool.

        Args:
            name: Tool identifier, e.g. ``obsidian_get_file_contents``.
            args: Raw arguments as received from the caller.

        Returns:
            The handler's result, unchanged.

        Raises:
            UnknownToolError: If ``name`` is not registered (no request is sent).
            pydantic.ValidationError: If ``args`` do not satisfy the tool's input model.
            ObsidianError: If the REST API call fails.
        """
        handler = self.get_handler(name)
        logger.debug("Running tool %s", name)
        return await handler.run_tool(args)
