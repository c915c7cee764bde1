"""Tests for the FastMCP binding and the summarization prompt."""

import pytest
from mcp.types import ImageContent, TextContent

from obsidian_rest.constants import TOOL_GET_FILE_CONTENTS, TOOL_PATCH_CONTENT
from obsidian_rest.prompts import NOTE_SUMMARIZATION_PROMPT
from obsidian_rest.server import create_server, first_text


def _content_blocks(result):
    # FastMCP returns (content, structured) for tools with an output schema
    if isinstance(result, tuple):
        return result[0]
    return result


def test_first_text_returns_text_item():
    assert first_text([TextContent(type="text", text="hello")]) == "hello"


def test_first_text_rejects_non_text_item():
    image = ImageContent(type="image", data="AAAA", mimeType="image/png")
    with pytest.raises(RuntimeError, match="Unexpected result type"):
        first_text([image])


def test_first_text_rejects_empty_result():
    with pytest.raises(RuntimeError):
        first_text([])


def test_prompt_substitutes_note_content():
    rendered = NOTE_SUMMARIZATION_PROMPT.render("Buy milk")

    assert rendered.endswith("Note to summarize:\nBuy milk")
    assert "{{note_content}}" not in rendered


@pytest.mark.integration
@pytest.mark.asyncio
async def test_server_lists_catalog_tools(app_context):
    mcp = create_server(app_context)

    tools = await mcp.list_tools()

    assert {tool.name for tool in tools} == set(app_context.registry.names)
    patch = next(tool for tool in tools if tool.name == TOOL_PATCH_CONTENT)
    assert set(patch.inputSchema["required"]) == {
        "filepath",
        "operation",
        "target_type",
        "target",
        "content",
    }
    assert patch.inputSchema["properties"]["operation"]["enum"] == ["append", "prepend", "replace"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_server_routes_calls_through_registry(app_context, fake_api):
    mcp = create_server(app_context)

    result = await mcp.call_tool(TOOL_GET_FILE_CONTENTS, {"filepath": "A.md"})

    blocks = _content_blocks(result)
    assert blocks[0].text == "# A\n\nAlpha content"
    assert [request.url.path for request in fake_api.requests] == ["/vault/A.md"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_server_exposes_summarization_prompt(app_context):
    mcp = create_server(app_context)

    prompts = await mcp.list_prompts()
    assert [prompt.name for prompt in prompts] == ["note_summarization"]

    result = await mcp.get_prompt("note_summarization", {"note_content": "Buy milk"})

    assert len(result.messages) == 1
    assert result.messages[0].role == "user"
    assert result.messages[0].content.text.endswith("Buy milk")
