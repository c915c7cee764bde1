"""Pydantic input models for note read and write operations.

This module defines input models for:
- Reading a single note
- Reading several notes at once
- Appending to a note
- Patching content relative to a heading, block or frontmatter field
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .base import BaseFileInput

PatchOperation = Literal["append", "prepend", "replace"]
PatchTargetType = Literal["heading", "block", "frontmatter"]


class GetFileContentsInput(BaseFileInput):
    """Input model for obsidian_get_file_contents tool.

    Examples:
        >>> GetFileContentsInput(filepath="Daily Notes/2023-01-01.md")
    """

    filepath: str = Field(
        min_length=1,
        description=(
            "Path to the file to read (relative to your vault root, "
            "e.g., 'Daily Notes/2023-01-01.md')"
        ),
        json_schema_extra={"format": "path"},
    )


class BatchGetFileContentsInput(BaseModel):
    """Input model for obsidian_batch_get_file_contents tool.

    Examples:
        >>> BatchGetFileContentsInput(filepaths=["Daily Notes/2023-01-01.md", "Projects/Project X.md"])
    """

    filepaths: list[str] = Field(
        description=(
            "List of file paths to read; an invalid path is reported inline "
            "instead of failing the batch (e.g., ['Daily Notes/2023-01-01.md', 'Projects/Project X.md'])"
        ),
    )


class AppendContentInput(BaseFileInput):
    """Input model for obsidian_append_content tool.

    Creates the file if it does not exist yet.

    Examples:
        >>> AppendContentInput(filepath="Inbox.md", content="- call Alice\\n")
    """

    content: str = Field(
        min_length=1,
        description="Content to append to the end of the file",
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"filepath": "Inbox.md", "content": "- call Alice\n"},
            ]
        }


class PatchContentInput(BaseFileInput):
    """Input model for obsidian_patch_content tool.

    Target resolution (heading paths, block ids, frontmatter fields) happens
    in the REST API; only presence is checked here.

    Examples:
        >>> PatchContentInput(
        ...     filepath="Projects/Development.md",
        ...     operation="prepend",
        ...     target_type="heading",
        ...     target="Development::Web Projects::Current",
        ...     content="- New project idea\\n",
        ... )
    """

    operation: PatchOperation = Field(
        description=(
            "Operation to perform: 'append' (add after target), "
            "'prepend' (add before target), or 'replace' (replace target)"
        ),
    )

    target_type: PatchTargetType = Field(
        description=(
            "Type of target: 'heading' (a section heading like '## Title'), "
            "'block' (a block reference), or 'frontmatter' (YAML frontmatter field)"
        ),
    )

    target: str = Field(
        min_length=1,
        description=(
            "Target identifier: for headings, the full heading path from the top-level "
            "heading separated by '::' (e.g., 'Project Ideas::Development'); for blocks, "
            "the block ID; for frontmatter, the field name (e.g., 'tags')"
        ),
    )

    content: str = Field(
        description="Content to insert or replace at the target location",
    )

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        """Validate the target is not blank."""
        if not v.strip():
            raise ValueError(
                "Target cannot be empty. "
                "Provide a heading path, block ID or frontmatter field name."
            )
        return v

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "filepath": "Projects/ProjectX.md",
                    "operation": "replace",
                    "target_type": "frontmatter",
                    "target": "status",
                    "content": "In Progress",
                },
            ]
        }
