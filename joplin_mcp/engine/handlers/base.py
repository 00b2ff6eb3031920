"""Base infrastructure for tool handlers.

Each handler receives its validated parameter model and a HandlerContext,
builds one BackendRequest, sends it, and returns a ToolResult.
"""

from dataclasses import dataclass
from typing import Any, Callable, Coroutine
from urllib.parse import quote

from ...models import ToolResult
from ...services.joplin_client import JoplinClient


@dataclass(frozen=True)
class HandlerContext:
    """Context object passed to all handlers.

    Only holds the shared backend client; handlers keep no state between calls.
    """

    client: JoplinClient


# Type alias for handler functions
HandlerFunc = Callable[
    [Any, HandlerContext],
    Coroutine[Any, Any, ToolResult],
]


def path_segment(value: str) -> str:
    """Percent-encode an identifier for use as a single URL path segment."""
    return quote(value, safe="")
