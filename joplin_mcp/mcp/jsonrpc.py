"""JSON-RPC 2.0 envelopes for the MCP endpoint.

Every response, success or failure, echoes the request ``id`` as given.
Requests without an ``id`` get ``"id": null``; none is treated as a
notification.
"""

from typing import Any

JSONRPC_VERSION = "2.0"

# Error codes used by this server
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Success envelope carrying ``result``."""
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Error envelope.

    Args:
        id: Request ID, or None when the request could not be read
        code: One of the error-code constants above
        message: Text shown to the MCP client

    Returns:
        Envelope with an ``error`` member instead of ``result``
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "error": {"code": code, "message": message}}
