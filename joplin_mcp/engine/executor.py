"""Tool executor: resolves a tool name, validates its arguments and runs it."""

import logging
from typing import Any

from ..errors import UnknownToolError
from ..mcp.validation import validate_tool_arguments
from ..models import ToolName
from ..services.joplin_client import JoplinClient
from .handlers import (
    HandlerContext,
    HandlerFunc,
    handle_create_note,
    handle_delete_note,
    handle_get_note,
    handle_list_folders,
    handle_list_notes,
    handle_list_tags,
    handle_search_notes,
    handle_update_note,
)

logger = logging.getLogger(__name__)

HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.LIST_NOTES: handle_list_notes,
    ToolName.GET_NOTE: handle_get_note,
    ToolName.CREATE_NOTE: handle_create_note,
    ToolName.UPDATE_NOTE: handle_update_note,
    ToolName.DELETE_NOTE: handle_delete_note,
    ToolName.SEARCH_NOTES: handle_search_notes,
    ToolName.LIST_FOLDERS: handle_list_folders,
    ToolName.LIST_TAGS: handle_list_tags,
}


class ToolExecutor:
    """Runs Joplin tools against the backend.

    Stateless apart from the shared client, so one instance serves all
    concurrent calls.
    """

    def __init__(self, client: JoplinClient):
        self.ctx = HandlerContext(client=client)

    async def execute(self, tool_name: str, arguments: dict[str, Any] | None) -> str:
        """Execute a tool and return its text result.

        Args:
            tool_name: Name from tools/call
            arguments: Raw, untyped arguments from tools/call

        Returns:
            Raw backend payload, or a confirmation message for delete_note

        Raises:
            UnknownToolError: tool_name is not registered
            InvalidParamsError: arguments failed validation
            BackendError: the backend request failed
        """
        try:
            tool = ToolName(tool_name)
        except ValueError:
            raise UnknownToolError(tool_name) from None

        params = validate_tool_arguments(tool, arguments)
        logger.debug(f"Executing tool {tool}")
        result = await HANDLERS[tool](params, self.ctx)
        return result.text
