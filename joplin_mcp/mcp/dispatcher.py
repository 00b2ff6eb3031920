"""JSON-RPC method routing for the MCP endpoint.

Stateless: every envelope is handled on its own and produces exactly one
response envelope carrying the request's ``id`` unchanged (``None`` when the
request had none).
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .. import __version__
from ..errors import AdapterError, InvalidParamsError
from ..models import ToolCallParams
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import list_tools

if TYPE_CHECKING:
    from ..engine import ToolExecutor

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "joplin-mcp-server"


def server_info() -> dict:
    """Result payload of the initialize method."""
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "serverInfo": {"name": SERVER_NAME, "version": __version__},
        "capabilities": {"tools": {}},
    }


def text_content(text: str) -> dict:
    """Shape tool output as a tools/call result holding one text block."""
    return {"content": [{"type": "text", "text": text}]}


async def dispatch(body: Any, executor: "ToolExecutor") -> dict:
    """Handle a single JSON-RPC request and return its response envelope."""
    if not isinstance(body, dict):
        return jsonrpc_error(None, INVALID_REQUEST, "Invalid Request")

    id = body.get("id")
    method = body.get("method")
    params = body.get("params")

    if not isinstance(method, str):
        return jsonrpc_error(id, INVALID_REQUEST, "Invalid Request")

    if method == "initialize":
        return jsonrpc_response(id, server_info())
    elif method == "tools/list":
        return jsonrpc_response(id, {"tools": list_tools()})
    elif method == "tools/call":
        return await _handle_call_tool(id, params, executor)
    elif method == "ping":
        return jsonrpc_response(id, {})
    else:
        logger.debug(f"Method not found: {method}")
        return jsonrpc_error(id, METHOD_NOT_FOUND, "Method not found")


async def dispatch_batch(bodies: list, executor: "ToolExecutor") -> list[dict]:
    """Handle a JSON-RPC batch. Members run concurrently, responses keep request order."""
    if not bodies:
        return [jsonrpc_error(None, INVALID_REQUEST, "Invalid Request")]
    return list(await asyncio.gather(*(dispatch(body, executor) for body in bodies)))


async def _handle_call_tool(id: Any, params: Any, executor: "ToolExecutor") -> dict:
    """Handle MCP tools/call request."""
    try:
        call = ToolCallParams.model_validate(params)
    except ValidationError:
        return jsonrpc_error(id, INVALID_PARAMS, "Invalid params")

    try:
        text = await executor.execute(call.name, call.arguments)
    except InvalidParamsError as e:
        return jsonrpc_error(id, INVALID_PARAMS, str(e))
    except AdapterError as e:
        logger.info(f"Tool {call.name} failed: {e}")
        return jsonrpc_error(id, INTERNAL_ERROR, str(e))
    except Exception as e:
        logger.error(f"Unexpected error in tool {call.name}: {e}", exc_info=True)
        return jsonrpc_error(id, INTERNAL_ERROR, "Internal error")

    return jsonrpc_response(id, text_content(text))
