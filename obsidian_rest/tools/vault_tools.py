"""Vault browsing tools."""

from __future__ import annotations

from mcp.types import TextContent

from obsidian_rest.constants import TOOL_LIST_FILES_IN_DIR, TOOL_LIST_FILES_IN_VAULT
from obsidian_rest.models import ListFilesInDirInput, ListFilesInVaultInput
from obsidian_rest.tools.base import ToolHandler, json_result


class ListFilesInVaultToolHandler(ToolHandler):
    """List the vault root (directories end with ``/``)."""

    name = TOOL_LIST_FILES_IN_VAULT
    description = (
        "Lists all files and directories in the root directory of your Obsidian vault. "
        "Use this to discover the top-level structure of your vault."
    )
    input_model = ListFilesInVaultInput

    async def run(self, params: ListFilesInVaultInput) -> list[TextContent]:
        files = await self.obsidian.list_files_in_vault()
        return json_result(files)


class ListFilesInDirToolHandler(ToolHandler):
    """List one directory of the vault.

    Error Handling:
        - Missing or empty directory: the API answers 404 (``Error 40400: Not Found``)
    """

    name = TOOL_LIST_FILES_IN_DIR
    description = (
        "Lists all files and directories within a specific folder in your Obsidian vault. "
        "Use this to browse the contents of a particular directory."
    )
    input_model = ListFilesInDirInput

    async def run(self, params: ListFilesInDirInput) -> list[TextContent]:
        files = await self.obsidian.list_files_in_dir(params.dirpath)
        return json_result(files)
