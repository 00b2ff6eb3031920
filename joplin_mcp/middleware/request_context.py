"""Request context middleware.

Tags every HTTP response with a request id and logs one access line per
request, using the pure ASGI pattern.
"""

import logging
import time
from uuid import uuid4

logger = logging.getLogger(__name__)


class RequestContextMiddleware:
    """
    Add a request id to all responses and log request outcome.

    Uses pure ASGI middleware pattern instead of BaseHTTPMiddleware
    to avoid Content-Length mismatch issues with streaming responses.

    Headers added:
        - X-Request-Id: Unique request identifier for tracing
        - X-Content-Type-Options: nosniff
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid4())
        start_time = time.perf_counter()
        status_code = 500

        async def send_with_headers(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode()))
                headers.append((b"x-content-type-options", b"nosniff"))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_headers)
        finally:
            latency_ms = int((time.perf_counter() - start_time) * 1000)
            logger.info(
                f"{scope.get('method', '-')} {scope.get('path', '-')} "
                f"{status_code} {latency_ms}ms request_id={request_id}"
            )
