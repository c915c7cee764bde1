"""Common machinery for tool handlers."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Optional

from mcp.types import TextContent, Tool
from pydantic import BaseModel

from obsidian_rest.client import ObsidianClient


def text_result(text: str) -> list[TextContent]:
    """Wrap a string as a single-item tool result."""
    return [TextContent(type="text", text=text)]


def json_result(payload: Any) -> list[TextContent]:
    """Serialize ``payload`` as indented JSON in a single-item tool result."""
    return text_result(json.dumps(payload, indent=2, ensure_ascii=False))


class ToolHandler(ABC):
    """One catalog entry: a name, a description, an input model and a runner.

    Subclasses set ``name``, ``description`` and ``input_model`` and implement
    :meth:`run`, which receives the already validated input model.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    input_model: ClassVar[type[BaseModel]]

    def __init__(self, obsidian: ObsidianClient) -> None:
        self.obsidian = obsidian

    def input_schema(self) -> dict[str, Any]:
        schema = self.input_model.model_json_schema()
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return schema

    def get_tool_description(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema())

    def parse_arguments(self, args: Optional[Mapping[str, Any]]) -> BaseModel:
        """Validate raw arguments against the input model.

        Raises:
            pydantic.ValidationError: If a required argument is missing or malformed.
        """
        return self.input_model.model_validate(dict(args or {}))

    async def run_tool(self, args: Optional[Mapping[str, Any]]) -> list[TextContent]:
        return await self.run(self.parse_arguments(args))

    @abstractmethod
    async def run(self, params: Any) -> list[TextContent]:
        """Execute the tool against the REST API."""
