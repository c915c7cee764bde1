"""Note reading and editing tools.

This module provides the handlers for:
- Reading one note
- Reading several notes in one call
- Appending to the end of a note
- Patching content at a heading, block reference or frontmatter field

All handlers delegate to :class:`obsidian_rest.client.ObsidianClient`.
"""

from __future__ import annotations

import logging

from mcp.types import TextContent

from obsidian_rest.constants import (
    TOOL_APPEND_CONTENT,
    TOOL_BATCH_GET_FILE_CONTENTS,
    TOOL_GET_FILE_CONTENTS,
    TOOL_PATCH_CONTENT,
)
from obsidian_rest.models import (
    AppendContentInput,
    BatchGetFileContentsInput,
    GetFileContentsInput,
    PatchContentInput,
)
from obsidian_rest.tools.base import ToolHandler, text_result

logger = logging.getLogger(__name__)


# ==============================================================================
# READ OPERATIONS
# ==============================================================================


class GetFileContentsToolHandler(ToolHandler):
    """Return the raw markdown of one note."""

    name = TOOL_GET_FILE_CONTENTS
    description = (
        "Retrieve the complete content of a single file from your vault. "
        "Use this when you need to read an entire note."
    )
    input_model = GetFileContentsInput

    async def run(self, params: GetFileContentsInput) -> list[TextContent]:
        content = await self.obsidian.get_file_contents(params.filepath)
        return text_result(content)


class BatchGetFileContentsToolHandler(ToolHandler):
    """Read several notes in request order, never failing as a whole.

    Each file renders as ``# {filepath}``, a blank line, its content and a
    ``---`` divider. Files that cannot be read (missing, invalid path, remote
    or transport failure) carry ``Error reading file: {message}`` instead.

    Examples:
        - Use when: comparing a handful of notes found by a search
        - Don't use: a single note, use obsidian_get_file_contents
    """

    name = TOOL_BATCH_GET_FILE_CONTENTS
    description = (
        "Retrieve the contents of multiple files in one operation. This is more efficient "
        "than making separate calls when you need content from multiple files. Each file's "
        "content is returned with a header indicating the filename and separated by dividers."
    )
    input_model = BatchGetFileContentsInput

    async def run(self, params: BatchGetFileContentsInput) -> list[TextContent]:
        results = await self.obsidian.fetch_batch_file_contents(params.filepaths)
        failed = sum(1 for result in results if not result.ok)
        if failed:
            logger.info("Batch read finished with %d of %d files failing", failed, len(results))
        return text_result("".join(result.render() for result in results))


# ==============================================================================
# WRITE OPERATIONS
# ==============================================================================


class AppendContentToolHandler(ToolHandler):
    """Append text to the end of a note, creating the note when missing."""

    name = TOOL_APPEND_CONTENT
    description = (
        "Append content to the end of a new or existing file in the vault. This adds content "
        "to the very end of the file. If you need to add content under a specific heading, "
        f"use the {TOOL_PATCH_CONTENT} tool instead."
    )
    input_model = AppendContentInput

    async def run(self, params: AppendContentInput) -> list[TextContent]:
        await self.obsidian.append_content(params.filepath, params.content)
        logger.info("Appended %d characters to '%s'", len(params.content), params.filepath)
        return text_result(f"Successfully appended content to {params.filepath}")


class PatchContentToolHandler(ToolHandler):
    """Insert or replace content relative to a heading, block or frontmatter field.

    Args:
        params (PatchContentInput): Validated input containing:
            - filepath (str): Vault-relative note path
            - operation (str): "append", "prepend" or "replace"
            - target_type (str): "heading", "block" or "frontmatter"
            - target (str): Heading path joined with "::", block id or field name

    Returns:
        ``Successfully patched content in {filepath}``

    Error Handling:
        - Unknown target: API error such as ``invalid-target``
        - Missing note: ``Error 40400: File does not exist``
    """

    name = TOOL_PATCH_CONTENT
    description = f"""Insert or modify content at a specific location in an existing note. Use this tool when you need to add or modify content under a specific heading, at a block reference, or in frontmatter fields.

PARAMETERS:
- filepath: The relative path to the file within the vault (e.g., "Periodic Notes/Daily/2025-03-20.md")
- operation: Choose "append" (add after target), "prepend" (add before target), or "replace" (replace target)
- target_type: Choose "heading", "block", or "frontmatter"
- target: Specify what to target (see detailed instructions below)
- content: The content you want to add or replace

HEADING TARGETS - IMPORTANT RULES:
1. For heading targets, use the FULL PATH from the top-level heading (H1) to your target heading
2. Separate heading levels with "::" (e.g., "2025-03-20::Notes" or "Project Ideas::Development::Web Apps")
3. Use the EXACT heading text without any hash symbols (#)
4. Example of a typical hierarchy:
   # Main Title (H1)
     ## Section (H2)
       ### Subsection (H3)
   To target the Subsection, use: "Main Title::Section::Subsection"
5. Common errors:
   - Skipping a heading level (like going H1 to H3 without including H2)
   - Using only the immediate parent heading without the full path
   - Using incorrect heading text (case, spacing, or special characters matter)

BLOCK REFERENCE TARGETS:
- Use the block ID without the "^" symbol (e.g., use "2d9b4a" not "^2d9b4a")

FRONTMATTER TARGETS:
- Use the exact field name in the YAML frontmatter (e.g., "tags" or "status")

COMMON ERRORS:
- "invalid-target": Double-check that your heading path is complete, starting from H1
- "content-already-preexists-in-target": The exact content already exists at the target
- If you get errors, try getting the file contents first to verify the exact heading text and structure

EXAMPLES:

Example 1: Add content under a Notes heading in a daily note
{TOOL_PATCH_CONTENT}(
filepath: "Periodic Notes/Daily/2025-03-20.md",
operation: "append",
target_type: "heading",
target: "2025-03-20::Notes",
content: "Hello from the assistant\\n\\n"
)

Example 2: Add content under a nested heading
{TOOL_PATCH_CONTENT}(
filepath: "Projects/Development.md",
operation: "prepend",
target_type: "heading",
target: "Development::Web Projects::Current",
content: "- New project idea\\n"
)

Example 3: Update a frontmatter field
{TOOL_PATCH_CONTENT}(
filepath: "Projects/ProjectX.md",
operation: "replace",
target_type: "frontmatter",
target: "status",
content: "In Progress"
)"""
    input_model = PatchContentInput

    async def run(self, params: PatchContentInput) -> list[TextContent]:
        await self.obsidian.patch_content(
            params.filepath,
            params.operation,
            params.target_type,
            params.target,
            params.content,
        )
        logger.info(
            "Patched '%s' (%s %s '%s')",
            params.filepath,
            params.operation,
            params.target_type,
            params.target,
        )
        return text_result(f"Successfully patched content in {params.filepath}")
