"""Pydantic models for Joplin MCP Server request/response schemas.

This module re-exports all models:

    from joplin_mcp.models import ToolName, ListNotesParams
"""

# ============ ENUMS ============
from .enums import HttpMethod, ToolName

# ============ REQUEST MODELS ============
from .requests import (
    CreateNoteParams,
    DeleteNoteParams,
    GetNoteParams,
    ListFoldersParams,
    ListNotesParams,
    ListTagsParams,
    SearchNotesParams,
    ToolCallParams,
    ToolParams,
    UpdateNoteParams,
)

# ============ RESPONSE MODELS ============
from .responses import BackendStatusInfo, HealthResponse, ToolResult

__all__ = [
    # Enums
    "HttpMethod",
    "ToolName",
    # Request models
    "CreateNoteParams",
    "DeleteNoteParams",
    "GetNoteParams",
    "ListFoldersParams",
    "ListNotesParams",
    "ListTagsParams",
    "SearchNotesParams",
    "ToolCallParams",
    "ToolParams",
    "UpdateNoteParams",
    # Response models
    "BackendStatusInfo",
    "HealthResponse",
    "ToolResult",
]
