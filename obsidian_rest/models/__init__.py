"""Pydantic input models for MCP tool validation.

Each model is the input schema of one tool. The JSON schema generated from
the model is published as the tool's ``inputSchema``, and incoming arguments
are validated against it before any request reaches the REST API.

Architecture:
- base: BaseFileInput and shared path validation
- vault_models: Input models for vault browsing
- note_models: Input models for reading and editing notes
- search_models: Input models for simple and JsonLogic search

Usage:
    from obsidian_rest.models import GetFileContentsInput, PatchContentInput
"""

from .base import BaseFileInput
from .vault_models import ListFilesInVaultInput, ListFilesInDirInput
from .note_models import (
    GetFileContentsInput,
    BatchGetFileContentsInput,
    AppendContentInput,
    PatchContentInput,
    PatchOperation,
    PatchTargetType,
)
from .search_models import SimpleSearchInput, ComplexSearchInput

__all__ = [
    # Base models
    "BaseFileInput",
    # Vault models
    "ListFilesInVaultInput",
    "ListFilesInDirInput",
    # Note models
    "GetFileContentsInput",
    "BatchGetFileContentsInput",
    "AppendContentInput",
    "PatchContentInput",
    "PatchOperation",
    "PatchTargetType",
    # Search models
    "SimpleSearchInput",
    "ComplexSearchInput",
]
