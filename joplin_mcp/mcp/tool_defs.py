"""MCP Tool Definitions for the Joplin MCP Server.

This module contains all tool definitions returned by the tools/list method.
Each tool definition includes the schema for its input parameters.

Tool Categories:
    - Notes: list_notes, get_note, create_note, update_note, delete_note
    - Lookup: search_notes, list_folders, list_tags

The list is built once at import time and never mutated; ``list_tools``
returns it in the same order on every call.
"""

import copy
from typing import Any

from ..models import ToolName

TOOL_DEFINITIONS: tuple[dict[str, Any], ...] = (
    # ============ Notes ============
    {
        "name": ToolName.LIST_NOTES.value,
        "description": "List all notes or notes in a specific folder",
        "inputSchema": {
            "type": "object",
            "properties": {
                "folder_id": {
                    "type": "string",
                    "description": "Optional folder ID to filter notes",
                },
                "limit": {
                    "type": "number",
                    "description": "Number of notes per page (max 100)",
                    "default": 50,
                },
                "page": {
                    "type": "number",
                    "description": "Page number (starts at 1)",
                    "default": 1,
                },
            },
        },
    },
    {
        "name": ToolName.GET_NOTE.value,
        "description": "Get a specific note by ID",
        "inputSchema": {
            "type": "object",
            "properties": {
                "note_id": {"type": "string", "description": "The ID of the note to retrieve"},
            },
            "required": ["note_id"],
        },
    },
    {
        "name": ToolName.CREATE_NOTE.value,
        "description": "Create a new note",
        "inputSchema": {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "The title of the note"},
                "body": {"type": "string", "description": "The body of the note in Markdown"},
                "folder_id": {
                    "type": "string",
                    "description": "Optional folder ID to create the note in",
                },
            },
            "required": ["title", "body"],
        },
    },
    {
        "name": ToolName.UPDATE_NOTE.value,
        "description": "Update an existing note",
        "inputSchema": {
            "type": "object",
            "properties": {
                "note_id": {"type": "string", "description": "The ID of the note to update"},
                "title": {"type": "string", "description": "New title for the note"},
                "body": {"type": "string", "description": "New body for the note in Markdown"},
            },
            "required": ["note_id"],
        },
    },
    {
        "name": ToolName.DELETE_NOTE.value,
        "description": "Delete a note (moves to trash by default)",
        "inputSchema": {
            "type": "object",
            "properties": {
                "note_id": {"type": "string", "description": "The ID of the note to delete"},
            },
            "required": ["note_id"],
        },
    },
    # ============ Lookup ============
    {
        "name": ToolName.SEARCH_NOTES.value,
        "description": "Search for notes using Joplin's search syntax",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"},
                "type": {
                    "type": "string",
                    "description": "Type of item to search (note, folder, tag)",
                },
            },
            "required": ["query"],
        },
    },
    {
        "name": ToolName.LIST_FOLDERS.value,
        "description": "List all notebooks/folders",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": ToolName.LIST_TAGS.value,
        "description": "List all tags",
        "inputSchema": {"type": "object", "properties": {}},
    },
)

TOOL_NAMES: frozenset[str] = frozenset(tool["name"] for tool in TOOL_DEFINITIONS)


def list_tools() -> list[dict[str, Any]]:
    """Return the tool descriptors in discovery order."""
    return copy.deepcopy(list(TOOL_DEFINITIONS))
