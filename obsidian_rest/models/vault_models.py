"""Pydantic input models for vault browsing operations."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .base import validate_vault_path


class ListFilesInVaultInput(BaseModel):
    """Input model for obsidian_list_files_in_vault tool.

    This tool has no parameters; the model keeps the catalog uniform.
    """


class ListFilesInDirInput(BaseModel):
    """Input model for obsidian_list_files_in_dir tool.

    Examples:
        >>> ListFilesInDirInput(dirpath="Daily Notes")
        >>> ListFilesInDirInput(dirpath="Projects/2025/")
    """

    dirpath: str = Field(
        min_length=1,
        description=(
            "Path to the directory to list (relative to your vault root, e.g., "
            "'Daily Notes' or 'Projects'). Note that empty directories will not be returned."
        ),
    )

    @field_validator("dirpath")
    @classmethod
    def validate_dirpath(cls, v: str) -> str:
        """Validate the directory path and drop any trailing slash."""
        cleaned = validate_vault_path(v, kind="Directory path").rstrip("/")
        if not cleaned:
            raise ValueError(
                "Directory path cannot be just '/'. "
                "Use obsidian_list_files_in_vault to list the vault root."
            )
        return cleaned

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"dirpath": "Daily Notes"},
                {"dirpath": "Projects/2025"},
            ]
        }
