"""MCP HTTP transport.

A single endpoint, ``POST /``, accepting a JSON-RPC 2.0 envelope (or a batch).
Only malformed JSON is rejected at the HTTP level (400); every JSON-RPC
outcome, success or error, is returned with status 200. Other HTTP methods
on ``/`` get 405 from the router.
"""

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .api.deps import get_executor
from .engine import ToolExecutor
from .mcp import PARSE_ERROR, dispatch, dispatch_batch, jsonrpc_error

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", tags=["MCP Transport"])
async def mcp_transport_endpoint(
    request: Request,
    executor: Annotated[ToolExecutor, Depends(get_executor)],
) -> JSONResponse:
    """
    MCP JSON-RPC endpoint.

    Config example (HTTP MCP client):
    ```json
    {"mcpServers": {"joplin": {"type": "http", "url": "http://127.0.0.1:3000/"}}}
    ```
    """
    raw_body = await request.body()
    try:
        body = json.loads(raw_body)
    except ValueError:
        logger.debug("Rejecting request with malformed JSON body")
        return JSONResponse(jsonrpc_error(None, PARSE_ERROR, "Parse error"), status_code=400)

    if isinstance(body, list):
        return JSONResponse(await dispatch_batch(body, executor))

    return JSONResponse(await dispatch(body, executor))
