"""Enumeration types for the Joplin MCP Server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available Joplin tools, in discovery order."""

    LIST_NOTES = "list_notes"
    GET_NOTE = "get_note"
    CREATE_NOTE = "create_note"
    UPDATE_NOTE = "update_note"
    DELETE_NOTE = "delete_note"
    SEARCH_NOTES = "search_notes"
    LIST_FOLDERS = "list_folders"
    LIST_TAGS = "list_tags"


class HttpMethod(StrEnum):
    """HTTP verbs used against the Joplin REST API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
