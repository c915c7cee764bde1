"""FastMCP server initialization and tool registration."""

import logging
import os
import signal
import sys
from typing import Annotated, Any, Mapping, Optional, Sequence

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.prompts.base import Message, UserMessage
from mcp.types import TextContent
from pydantic import Field

from obsidian_rest.config import load_remote_config
from obsidian_rest.constants import (
    LOG_LEVEL,
    TOOL_APPEND_CONTENT,
    TOOL_BATCH_GET_FILE_CONTENTS,
    TOOL_COMPLEX_SEARCH,
    TOOL_GET_FILE_CONTENTS,
    TOOL_LIST_FILES_IN_DIR,
    TOOL_LIST_FILES_IN_VAULT,
    TOOL_PATCH_CONTENT,
    TOOL_SIMPLE_SEARCH,
)
from obsidian_rest.context import AppContext, create_app_context
from obsidian_rest.models import (
    AppendContentInput,
    BatchGetFileContentsInput,
    ComplexSearchInput,
    GetFileContentsInput,
    ListFilesInDirInput,
    PatchContentInput,
    PatchOperation,
    PatchTargetType,
    SimpleSearchInput,
)
from obsidian_rest.prompts import NOTE_SUMMARIZATION_PROMPT

logger = logging.getLogger(__name__)

SERVER_NAME = "Obsidian"


def first_text(result: Sequence[Any]) -> str:
    """Return the text of the first content item of a tool result.

    Raises:
        RuntimeError: If the result is empty or its first item is not text.
    """
    if not result or not isinstance(result[0], TextContent):
        raise RuntimeError("Unexpected result type from tool")
    return result[0].text


def _field_description(model: Any, field: str) -> Optional[str]:
    return model.model_fields[field].description


def create_server(context: AppContext) -> FastMCP:
    """Build a FastMCP server exposing the tool catalog of ``context``.

    Tool parameters are declared with FastMCP's own signature-based schema,
    mirroring the fields of each tool's input model.
    """
    mcp = FastMCP(SERVER_NAME)
    registry = context.registry

    def describe(name: str) -> str:
        return registry.get_handler(name).description

    async def call(name: str, args: Mapping[str, Any]) -> str:
        return first_text(await registry.run_tool(name, args))

    # ==========================================================================
    # BROWSE TOOLS
    # ==========================================================================

    @mcp.tool(name=TOOL_LIST_FILES_IN_VAULT, description=describe(TOOL_LIST_FILES_IN_VAULT))
    async def list_files_in_vault() -> str:
        return await call(TOOL_LIST_FILES_IN_VAULT, {})

    @mcp.tool(name=TOOL_LIST_FILES_IN_DIR, description=describe(TOOL_LIST_FILES_IN_DIR))
    async def list_files_in_dir(
        dirpath: Annotated[str, Field(description=_field_description(ListFilesInDirInput, "dirpath"))],
    ) -> str:
        return await call(TOOL_LIST_FILES_IN_DIR, {"dirpath": dirpath})

    # ==========================================================================
    # SEARCH TOOLS
    # ==========================================================================

    @mcp.tool(name=TOOL_SIMPLE_SEARCH, description=describe(TOOL_SIMPLE_SEARCH))
    async def simple_search(
        query: Annotated[str, Field(description=_field_description(SimpleSearchInput, "query"))],
        context_length: Annotated[
            Optional[int],
            Field(description=_field_description(SimpleSearchInput, "context_length")),
        ] = None,
    ) -> str:
        return await call(TOOL_SIMPLE_SEARCH, {"query": query, "context_length": context_length})

    @mcp.tool(name=TOOL_COMPLEX_SEARCH, description=describe(TOOL_COMPLEX_SEARCH))
    async def complex_search(
        query: Annotated[dict[str, Any], Field(description=_field_description(ComplexSearchInput, "query"))],
    ) -> str:
        return await call(TOOL_COMPLEX_SEARCH, {"query": query})

    # ==========================================================================
    # READ TOOLS
    # ==========================================================================

    @mcp.tool(name=TOOL_GET_FILE_CONTENTS, description=describe(TOOL_GET_FILE_CONTENTS))
    async def get_file_contents(
        filepath: Annotated[str, Field(description=_field_description(GetFileContentsInput, "filepath"))],
    ) -> str:
        return await call(TOOL_GET_FILE_CONTENTS, {"filepath": filepath})

    @mcp.tool(name=TOOL_BATCH_GET_FILE_CONTENTS, description=describe(TOOL_BATCH_GET_FILE_CONTENTS))
    async def batch_get_file_contents(
        filepaths: Annotated[
            list[str],
            Field(description=_field_description(BatchGetFileContentsInput, "filepaths")),
        ],
    ) -> str:
        return await call(TOOL_BATCH_GET_FILE_CONTENTS, {"filepaths": filepaths})

    # ==========================================================================
    # WRITE TOOLS
    # ==========================================================================

    @mcp.tool(name=TOOL_APPEND_CONTENT, description=describe(TOOL_APPEND_CONTENT))
    async def append_content(
        filepath: Annotated[str, Field(description=_field_description(AppendContentInput, "filepath"))],
        content: Annotated[str, Field(description=_field_description(AppendContentInput, "content"))],
    ) -> str:
        return await call(TOOL_APPEND_CONTENT, {"filepath": filepath, "content": content})

    @mcp.tool(name=TOOL_PATCH_CONTENT, description=describe(TOOL_PATCH_CONTENT))
    async def patch_content(
        filepath: Annotated[str, Field(description=_field_description(PatchContentInput, "filepath"))],
        operation: Annotated[PatchOperation, Field(description=_field_description(PatchContentInput, "operation"))],
        target_type: Annotated[
            PatchTargetType,
            Field(description=_field_description(PatchContentInput, "target_type")),
        ],
        target: Annotated[str, Field(description=_field_description(PatchContentInput, "target"))],
        content: Annotated[str, Field(description=_field_description(PatchContentInput, "content"))],
    ) -> str:
        return await call(
            TOOL_PATCH_CONTENT,
            {
                "filepath": filepath,
                "operation": operation,
                "target_type": target_type,
                "target": target,
                "content": content,
            },
        )

    # ==========================================================================
    # PROMPTS
    # ==========================================================================

    @mcp.prompt(name=NOTE_SUMMARIZATION_PROMPT.name, description=NOTE_SUMMARIZATION_PROMPT.description)
    def note_summarization(
        note_content: Annotated[str, Field(description="The content of the note to summarize")],
    ) -> list[Message]:
        return [UserMessage(NOTE_SUMMARIZATION_PROMPT.render(note_content))]

    return mcp


def _handle_shutdown(signum: int, frame: Any) -> None:
    logger.info("Received %s - shutting down Obsidian MCP server", signal.Signals(signum).name)
    sys.stderr.flush()
    # the stdio reader thread blocks interpreter shutdown while stdin stays open
    os._exit(0)


def run_server() -> None:
    """Start the MCP server with stdio transport.

    Exits with status 1 when the API key is missing or the server cannot
    start, and with status 0 on SIGINT/SIGTERM.
    """
    load_dotenv()
    # stdout carries the MCP stream; logs go to stderr
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", LOG_LEVEL).upper(), stream=sys.stderr)

    try:
        config = load_remote_config()
    except (ValueError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    mcp = create_server(create_app_context(config))

    signal.signal(signal.SIGINT, _handle_shutdown)
    signal.signal(signal.SIGTERM, _handle_shutdown)

    logger.info("Starting Obsidian MCP server (%s)", config.as_payload())
    try:
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        sys.exit(0)
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    run_server()
