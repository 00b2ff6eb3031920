"""API utilities and dependencies.

This package contains shared API utilities:
- deps: FastAPI dependency injection functions
"""

from .deps import get_backend_status, get_executor

__all__ = [
    "get_backend_status",
    "get_executor",
]
