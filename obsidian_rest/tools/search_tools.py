"""Search tools.

- obsidian_simple_search: full-text search with context around each match
- obsidian_complex_search: JsonLogic queries over note metadata
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.types import TextContent

from obsidian_rest.constants import TOOL_COMPLEX_SEARCH, TOOL_SIMPLE_SEARCH
from obsidian_rest.models import ComplexSearchInput, SimpleSearchInput
from obsidian_rest.tools.base import ToolHandler, json_result

logger = logging.getLogger(__name__)


def format_search_results(results: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Reshape simple-search hits into ``filename``/``score``/``matches`` payloads.

    Missing fields are defaulted so that every hit has the same shape; the
    ``match`` span of each match is renamed to ``match_position``.
    """
    formatted = []
    for result in results:
        matches = []
        for match in result.get("matches") or []:
            position = match.get("match") or {}
            matches.append(
                {
                    "context": match.get("context") or "",
                    "match_position": {
                        "start": position.get("start") or 0,
                        "end": position.get("end") or 0,
                    },
                }
            )
        formatted.append(
            {
                "filename": result.get("filename") or "",
                "score": result.get("score") or 0,
                "matches": matches,
            }
        )
    return formatted


class SimpleSearchToolHandler(ToolHandler):
    """Full-text search with context around each match.

    Returns:
        JSON list of ``{"filename", "score", "matches": [{"context", "match_position"}]}``
        shaped by :func:`format_search_results`.
    """

    name = TOOL_SIMPLE_SEARCH
    description = (
        "Simple text search across all files in the vault. Returns matches with surrounding context.\n"
        "Use this tool when you need to find specific text or phrases in your notes. "
        "Results include filenames with matches and context around each match."
    )
    input_model = SimpleSearchInput

    async def run(self, params: SimpleSearchInput) -> list[TextContent]:
        results = await self.obsidian.search(params.query, params.context_length)
        formatted = format_search_results(results)
        logger.info("Simple search for '%s' matched %d files", params.query, len(formatted))
        return json_result(formatted)


class ComplexSearchToolHandler(ToolHandler):
    """JsonLogic search; the API's result list is returned unchanged."""

    name = TOOL_COMPLEX_SEARCH
    description = """Advanced search using JsonLogic query expressions.
Use this for complex search criteria like finding files with specific tags, paths, or content patterns.

Example queries:
1. Find all markdown files: {"glob": ["*.md", {"var": "path"}]}
2. Find files with specific tag: {"in": ["#project", {"var": "tags"}]}
3. Find files in a folder: {"startsWith": [{"var": "path"}, "Projects/"]}

Only use this if the simple search tool isn't sufficient for your needs."""
    input_model = ComplexSearchInput

    async def run(self, params: ComplexSearchInput) -> list[TextContent]:
        results = await self.obsidian.search_json(params.query)
        return json_result(results)
