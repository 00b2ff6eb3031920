"""Lookup tool handlers.

Handles:
- search_notes: Full-text search using Joplin's search syntax
- list_folders: List all notebooks
- list_tags: List all tags
"""

from typing import Any

from ...models import HttpMethod, ListFoldersParams, ListTagsParams, SearchNotesParams, ToolResult
from ...services.joplin_client import BackendRequest
from .base import HandlerContext


def build_search_notes_request(params: SearchNotesParams) -> BackendRequest:
    query: dict[str, Any] = {"query": params.query}
    if params.type:
        query["type"] = params.type
    return BackendRequest(HttpMethod.GET, "/search", params=query)


async def handle_search_notes(params: SearchNotesParams, ctx: HandlerContext) -> ToolResult:
    text = await ctx.client.send(build_search_notes_request(params))
    return ToolResult(text=text)


async def handle_list_folders(params: ListFoldersParams, ctx: HandlerContext) -> ToolResult:
    text = await ctx.client.send(BackendRequest(HttpMethod.GET, "/folders"))
    return ToolResult(text=text)


async def handle_list_tags(params: ListTagsParams, ctx: HandlerContext) -> ToolResult:
    text = await ctx.client.send(BackendRequest(HttpMethod.GET, "/tags"))
    return ToolResult(text=text)
