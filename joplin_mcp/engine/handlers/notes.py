"""Note tool handlers.

Handles:
- list_notes: List notes, optionally within a folder
- get_note: Fetch one note with a fixed field projection
- create_note: Create a note
- update_note: Partially update a note
- delete_note: Delete a note
"""

from typing import Any

from ...models import (
    CreateNoteParams,
    DeleteNoteParams,
    GetNoteParams,
    HttpMethod,
    ListNotesParams,
    ToolResult,
    UpdateNoteParams,
)
from ...services.joplin_client import BackendRequest
from .base import HandlerContext, path_segment

# get_note always requests these fields, whatever the caller asks for
NOTE_FIELDS = "id,parent_id,title,body,markup_language"


def build_list_notes_request(params: ListNotesParams) -> BackendRequest:
    if params.folder_id:
        path = f"/folders/{path_segment(params.folder_id)}/notes"
    else:
        path = "/notes"

    query: dict[str, Any] = {}
    if params.limit > 0:
        query["limit"] = params.limit
    if params.page > 1:
        query["page"] = params.page

    return BackendRequest(HttpMethod.GET, path, params=query)


def build_get_note_request(params: GetNoteParams) -> BackendRequest:
    return BackendRequest(
        HttpMethod.GET,
        f"/notes/{path_segment(params.note_id)}",
        params={"fields": NOTE_FIELDS},
    )


def build_create_note_request(params: CreateNoteParams) -> BackendRequest:
    body: dict[str, Any] = {"title": params.title, "body": params.body}
    if params.folder_id:
        body["folder_id"] = params.folder_id
    return BackendRequest(HttpMethod.POST, "/notes", body=body)


def build_update_note_request(params: UpdateNoteParams) -> BackendRequest:
    """Only send the fields that were supplied; empty strings count as absent."""
    body: dict[str, Any] = {}
    if params.title:
        body["title"] = params.title
    if params.body:
        body["body"] = params.body
    return BackendRequest(HttpMethod.PUT, f"/notes/{path_segment(params.note_id)}", body=body)


def build_delete_note_request(params: DeleteNoteParams) -> BackendRequest:
    return BackendRequest(HttpMethod.DELETE, f"/notes/{path_segment(params.note_id)}")


async def handle_list_notes(params: ListNotesParams, ctx: HandlerContext) -> ToolResult:
    """List notes.

    Args:
        params: ListNotesParams with:
            - folder_id: restrict to one folder (optional)
            - limit: page size, sent only when > 0
            - page: page number, sent only when > 1

    Returns:
        ToolResult with the raw backend JSON
    """
    text = await ctx.client.send(build_list_notes_request(params))
    return ToolResult(text=text)


async def handle_get_note(params: GetNoteParams, ctx: HandlerContext) -> ToolResult:
    text = await ctx.client.send(build_get_note_request(params))
    return ToolResult(text=text)


async def handle_create_note(params: CreateNoteParams, ctx: HandlerContext) -> ToolResult:
    text = await ctx.client.send(build_create_note_request(params))
    return ToolResult(text=text)


async def handle_update_note(params: UpdateNoteParams, ctx: HandlerContext) -> ToolResult:
    """Partially update a note.

    Keys for title/body are omitted entirely when not supplied, so the
    backend keeps the current value instead of blanking it.
    """
    text = await ctx.client.send(build_update_note_request(params))
    return ToolResult(text=text)


async def handle_delete_note(params: DeleteNoteParams, ctx: HandlerContext) -> ToolResult:
    """Delete a note. The backend answers with an empty body, so a fixed
    confirmation is returned instead."""
    await ctx.client.send(build_delete_note_request(params))
    return ToolResult(text=f"Note {params.note_id} deleted successfully")
