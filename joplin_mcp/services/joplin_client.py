"""HTTP client for the Joplin Web Clipper REST API.

Every tool call becomes exactly one request built as a ``BackendRequest`` and
sent through ``JoplinClient.send``. Transport failures and error statuses are
normalized into ``BackendError`` subclasses; nothing is retried.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from ..config import Settings
from ..errors import BackendError, BackendStatusError, BackendTransportError
from ..models import HttpMethod

logger = logging.getLogger(__name__)

# Body returned by GET /ping when the Web Clipper service is running
PING_SENTINEL = "JoplinClipperServer"


@dataclass(frozen=True)
class BackendRequest:
    """A single call against the Joplin REST API.

    Query parameters stay structured; httpx encodes them and picks the
    separators, so optional parameters can be combined freely.
    """

    method: HttpMethod
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] | None = None


class JoplinClient:
    """Authenticated client for the Joplin backend.

    Holds one ``httpx.AsyncClient`` (connection pool) for the process
    lifetime. It keeps no per-request state, so concurrent calls are safe.
    """

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._token = token
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> "JoplinClient":
        return cls(
            settings.backend_url,
            token=settings.backend_token,
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, request: BackendRequest) -> str:
        """Send a request and return the raw response body.

        Args:
            request: The backend request to issue

        Returns:
            Response body text, unmodified

        Raises:
            BackendTransportError: Connection failure or timeout
            BackendStatusError: Response status >= 400
        """
        params = dict(request.params)
        if self._token:
            params["token"] = self._token

        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = params
        if request.body is not None:
            # httpx sets Content-Type: application/json for json= payloads
            kwargs["json"] = request.body

        try:
            response = await self._client.request(request.method.value, request.path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning(f"Joplin request timed out: {request.method} {request.path}")
            raise BackendTransportError(f"Request timeout: {request.method} {request.path}") from e
        except httpx.RequestError as e:
            logger.warning(f"Joplin request failed: {request.method} {request.path}: {e}")
            raise BackendTransportError(f"Request error: {e}") from e

        if response.status_code >= 400:
            logger.warning(
                f"Joplin returned {response.status_code} for {request.method} {request.path}"
            )
            raise BackendStatusError(response.status_code, response.text)

        logger.debug(f"{request.method} {request.path} -> {response.status_code}")
        return response.text

    async def ping(self) -> None:
        """Check that the Joplin Web Clipper service is answering.

        Raises:
            BackendError: Transport failure, error status, or an unexpected body
        """
        body = await self.send(BackendRequest(HttpMethod.GET, "/ping"))
        if body != PING_SENTINEL:
            raise BackendError(f"unexpected ping response: {body}")
