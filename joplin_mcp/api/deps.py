"""FastAPI dependency injection functions.

Components are built once in ``create_app`` and stored on ``app.state``;
these dependencies hand them to the endpoints.
"""

from fastapi import Request

from ..engine import ToolExecutor
from ..services import BackendStatus


def get_executor(request: Request) -> ToolExecutor:
    """Tool executor shared by all requests."""
    return request.app.state.executor


def get_backend_status(request: Request) -> BackendStatus:
    """Backend status written by the liveness probe."""
    return request.app.state.backend_status
