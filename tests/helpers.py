"""Helper functions for tests."""

import json
from typing import TYPE_CHECKING, Any

from mcp.types import (
    BlobResourceContents,
    PromptMessage,
    TextContent,
    TextResourceContents,
)

if TYPE_CHECKING:
    from fastmcp import Client
    from fastmcp.client.client import CallToolResult


def get_text_content(result: "CallToolResult") -> str:
    """Extract text content from a CallToolResult.

    Raises:
        AssertionError: If content is not TextContent
    """
    assert len(result.content) > 0, "Result has no content"
    content = result.content[0]
    assert isinstance(content, TextContent), f"Expected TextContent, got {type(content)}"
    return content.text


async def call_tool_json(client: "Client", name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Call a tool that must succeed and decode its JSON payload."""
    result = await client.call_tool(name, arguments)
    assert result.is_error is False
    return json.loads(get_text_content(result))


def get_prompt_text(message: PromptMessage) -> str:
    """Extract text from a PromptMessage.

    Raises:
        AssertionError: If content is not TextContent
    """
    content = message.content
    assert isinstance(content, TextContent), f"Expected TextContent, got {type(content)}"
    return content.text


def get_resource_text(contents: TextResourceContents | BlobResourceContents) -> str:
    """Extract text from resource contents (one entry of a read_resource result).

    Raises:
        AssertionError: If contents is not TextResourceContents
    """
    assert isinstance(contents, TextResourceContents), (
        f"Expected TextResourceContents, got {type(contents)}"
    )
    return contents.text
