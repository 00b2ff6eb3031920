"""Tool handlers for the Joplin MCP engine.

This package contains tool handlers organized by domain:
- notes: Note CRUD (list_notes, get_note, create_note, update_note, delete_note)
- lookup: Search and listings (search_notes, list_folders, list_tags)

Each handler is a standalone async function that takes:
- params: the tool's validated pydantic parameter model
- ctx: HandlerContext - shared backend client

And returns:
- ToolResult with the text to send back to the MCP caller
"""

from .base import HandlerContext, HandlerFunc, path_segment
from .lookup import (
    build_search_notes_request,
    handle_list_folders,
    handle_list_tags,
    handle_search_notes,
)
from .notes import (
    NOTE_FIELDS,
    build_create_note_request,
    build_delete_note_request,
    build_get_note_request,
    build_list_notes_request,
    build_update_note_request,
    handle_create_note,
    handle_delete_note,
    handle_get_note,
    handle_list_notes,
    handle_update_note,
)

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    "path_segment",
    # Note handlers
    "NOTE_FIELDS",
    "build_list_notes_request",
    "build_get_note_request",
    "build_create_note_request",
    "build_update_note_request",
    "build_delete_note_request",
    "handle_list_notes",
    "handle_get_note",
    "handle_create_note",
    "handle_update_note",
    "handle_delete_note",
    # Lookup handlers
    "build_search_notes_request",
    "handle_search_notes",
    "handle_list_folders",
    "handle_list_tags",
]
