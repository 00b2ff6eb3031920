"""MCP (Model Context Protocol) transport module.

This module contains components for the MCP HTTP transport:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- Tool argument validation
- Method dispatch

The HTTP router remains in mcp_transport.py.
"""

from .dispatcher import (
    PROTOCOL_VERSION,
    SERVER_NAME,
    dispatch,
    dispatch_batch,
    server_info,
    text_content,
)
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS, TOOL_NAMES, list_tools
from .validation import validate_tool_arguments

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    "TOOL_NAMES",
    "list_tools",
    # Validation
    "validate_tool_arguments",
    # Dispatch
    "PROTOCOL_VERSION",
    "SERVER_NAME",
    "dispatch",
    "dispatch_batch",
    "server_info",
    "text_content",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
