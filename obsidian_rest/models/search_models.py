"""Pydantic input models for search operations.

- Simple full-text search with context snippets
- JsonLogic search over note metadata
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from obsidian_rest.constants import DEFAULT_CONTEXT_LENGTH


class SimpleSearchInput(BaseModel):
    """Input model for obsidian_simple_search tool.

    Examples:
        >>> SimpleSearchInput(query="meeting notes")
        >>> SimpleSearchInput(query="TODO", context_length=50)
    """

    query: str = Field(
        min_length=1,
        description="Text to search for in the vault. Can be a simple word, phrase, or pattern.",
    )

    context_length: int = Field(
        DEFAULT_CONTEXT_LENGTH,
        ge=0,
        description=(
            "How many characters of context to return around each matching string "
            f"(default: {DEFAULT_CONTEXT_LENGTH} when omitted or null; 0 is sent as-is "
            "and returns matches without surrounding context)"
        ),
    )

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate search query is not empty."""
        if not v.strip():
            raise ValueError(
                "Search query cannot be empty. "
                "Provide a word or phrase to search for."
            )
        return v

    @field_validator("context_length", mode="before")
    @classmethod
    def default_context_length(cls, v: Any) -> Any:
        """Treat an explicit null as the default context length."""
        return DEFAULT_CONTEXT_LENGTH if v is None else v


class ComplexSearchInput(BaseModel):
    """Input model for obsidian_complex_search tool.

    Examples:
        >>> ComplexSearchInput(query={"glob": ["*.md", {"var": "path"}]})
    """

    query: dict[str, Any] = Field(
        description="JsonLogic query object defining search criteria.",
    )

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Validate the JsonLogic expression is not empty."""
        if not v:
            raise ValueError(
                "JsonLogic query cannot be empty. "
                'Example: {"glob": ["*.md", {"var": "path"}]}'
            )
        return v

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"query": {"glob": ["*.md", {"var": "path"}]}},
                {"query": {"in": ["#project", {"var": "tags"}]}},
            ]
        }
