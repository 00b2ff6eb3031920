"""Tool argument validation for MCP transport.

Arguments arrive as an untyped JSON object. Each tool has a pydantic model;
validation happens once, at the executor boundary, and failures become an
explicit invalid-params error instead of silently falling back to defaults.
"""

from typing import Any

from pydantic import ValidationError

from ..errors import InvalidParamsError
from ..models import (
    CreateNoteParams,
    DeleteNoteParams,
    GetNoteParams,
    ListFoldersParams,
    ListNotesParams,
    ListTagsParams,
    SearchNotesParams,
    ToolName,
    ToolParams,
    UpdateNoteParams,
)

PARAMS_MODELS: dict[ToolName, type[ToolParams]] = {
    ToolName.LIST_NOTES: ListNotesParams,
    ToolName.GET_NOTE: GetNoteParams,
    ToolName.CREATE_NOTE: CreateNoteParams,
    ToolName.UPDATE_NOTE: UpdateNoteParams,
    ToolName.DELETE_NOTE: DeleteNoteParams,
    ToolName.SEARCH_NOTES: SearchNotesParams,
    ToolName.LIST_FOLDERS: ListFoldersParams,
    ToolName.LIST_TAGS: ListTagsParams,
}


def format_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single line."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(item) for item in err["loc"]) or "arguments"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def validate_tool_arguments(tool: ToolName, arguments: dict[str, Any] | None) -> ToolParams:
    """Validate raw tool arguments into the tool's parameter model.

    Args:
        tool: Resolved tool name
        arguments: Raw arguments from tools/call (None is treated as empty)

    Returns:
        The typed parameter model for the tool

    Raises:
        InvalidParamsError: If arguments are not an object or fail validation
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise InvalidParamsError(tool.value, "arguments must be an object")

    model = PARAMS_MODELS[tool]
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise InvalidParamsError(tool.value, format_validation_error(e)) from e
