"""Base Pydantic models for MCP tool input validation.

This module defines the base model shared by every tool that addresses a
single file in the vault.

Base Models:
- BaseFileInput: Common validation for vault-relative file paths
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


def validate_vault_path(value: str, kind: str = "File path") -> str:
    """Validate a vault-relative path.

    Enforces:
    - Non-empty path (after stripping whitespace)
    - No '.' or '..' segments

    Args:
        value: The path to validate
        kind: Label used in error messages

    Returns:
        The path with surrounding whitespace removed

    Raises:
        ValueError: If the path is empty or contains traversal segments
    """
    cleaned = value.strip()

    if not cleaned:
        raise ValueError(
            f"{kind} cannot be empty. "
            "Provide a path relative to the vault root, e.g. 'Daily Notes/2025-01-01.md'."
        )

    parts = cleaned.strip("/").split("/")
    if any(part in {".", ".."} for part in parts):
        raise ValueError(
            f"{kind} cannot contain '.' or '..' path segments. "
            f"Invalid path: '{cleaned}'"
        )

    return cleaned


class BaseFileInput(BaseModel):
    """Base model for operations on a single vault file.

    All file-addressed input models should inherit from this class.
    """

    filepath: str = Field(
        min_length=1,
        description="Path to the file (relative to vault root)",
        json_schema_extra={"format": "path"},
        examples=["Daily Notes/2023-01-01.md", "Projects/Project X.md"],
    )

    @field_validator("filepath")
    @classmethod
    def validate_filepath(cls, v: str) -> str:
        """Validate the file path is a non-empty vault-relative path."""
        return validate_vault_path(v)
