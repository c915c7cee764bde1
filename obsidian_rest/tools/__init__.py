"""Tool handlers exposed over MCP.

Each handler couples a catalog entry (name, description, input model) with
the REST call that implements it. :func:`build_handlers` produces the full
catalog in registration order.
"""

from obsidian_rest.client import ObsidianClient
from obsidian_rest.tools.base import ToolHandler, json_result, text_result
from obsidian_rest.tools.vault_tools import ListFilesInDirToolHandler, ListFilesInVaultToolHandler
from obsidian_rest.tools.note_tools import (
    AppendContentToolHandler,
    BatchGetFileContentsToolHandler,
    GetFileContentsToolHandler,
    PatchContentToolHandler,
)
from obsidian_rest.tools.search_tools import ComplexSearchToolHandler, SimpleSearchToolHandler

HANDLER_CLASSES: tuple[type[ToolHandler], ...] = (
    ListFilesInVaultToolHandler,
    ListFilesInDirToolHandler,
    GetFileContentsToolHandler,
    SimpleSearchToolHandler,
    AppendContentToolHandler,
    PatchContentToolHandler,
    ComplexSearchToolHandler,
    BatchGetFileContentsToolHandler,
)


def build_handlers(obsidian: ObsidianClient) -> list[ToolHandler]:
    """Instantiate every catalog handler bound to ``obsidian``."""
    return [handler_class(obsidian) for handler_class in HANDLER_CLASSES]


__all__ = [
    "HANDLER_CLASSES",
    "ToolHandler",
    "build_handlers",
    "json_result",
    "text_result",
    "ListFilesInVaultToolHandler",
    "ListFilesInDirToolHandler",
    "GetFileContentsToolHandler",
    "BatchGetFileContentsToolHandler",
    "SimpleSearchToolHandler",
    "ComplexSearchToolHandler",
    "AppendContentToolHandler",
    "PatchContentToolHandler",
]
