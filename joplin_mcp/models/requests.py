"""Request models (Pydantic *Params classes) for the Joplin MCP Server."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ============ CORE REQUEST MODELS ============


class ToolCallParams(BaseModel):
    """Params of a tools/call request."""

    name: str = Field(..., description="The tool to execute")
    arguments: dict[str, Any] | None = Field(default=None, description="Tool arguments")


class ToolParams(BaseModel):
    """Base for per-tool argument models. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


# ============ NOTE PARAMS ============


class ListNotesParams(ToolParams):
    """Parameters for list_notes tool."""

    folder_id: str | None = Field(default=None, description="Folder to list notes from")
    limit: int = Field(default=0, description="Notes per page; 0 leaves the backend default")
    page: int = Field(default=1, description="Page number (starts at 1)")


class GetNoteParams(ToolParams):
    """Parameters for get_note tool."""

    note_id: str = Field(..., min_length=1, description="The ID of the note to retrieve")


class CreateNoteParams(ToolParams):
    """Parameters for create_note tool."""

    title: str = Field(..., description="The title of the note")
    body: str = Field(..., description="The body of the note in Markdown")
    folder_id: str | None = Field(default=None, description="Folder to create the note in")


class UpdateNoteParams(ToolParams):
    """Parameters for update_note tool."""

    note_id: str = Field(..., min_length=1, description="The ID of the note to update")
    title: str | None = Field(default=None, description="New title for the note")
    body: str | None = Field(default=None, description="New body for the note in Markdown")


class DeleteNoteParams(ToolParams):
    """Parameters for delete_note tool."""

    note_id: str = Field(..., min_length=1, description="The ID of the note to delete")


# ============ LOOKUP PARAMS ============


class SearchNotesParams(ToolParams):
    """Parameters for search_notes tool."""

    query: str = Field(..., description="Search query in Joplin search syntax")
    type: str | None = Field(default=None, description="Item type to search (note, folder, tag)")


class ListFoldersParams(ToolParams):
    """Parameters for list_folders tool (none)."""


class ListTagsParams(ToolParams):
    """Parameters for list_tags tool (none)."""
