"""Backend liveness probe.

Runs once, shortly after startup, and records the outcome in a
``BackendStatus`` that the health endpoint reads. The probe task is the only
writer; readers only ever see a complete snapshot because each update
replaces the snapshot object as a whole.
"""

import asyncio
import logging
from datetime import UTC, datetime

from ..errors import BackendError
from ..models import BackendStatusInfo
from .joplin_client import JoplinClient

logger = logging.getLogger(__name__)


class BackendStatus:
    """Latest known reachability of the Joplin backend."""

    def __init__(self):
        self._snapshot = BackendStatusInfo()

    @property
    def snapshot(self) -> BackendStatusInfo:
        return self._snapshot

    def record(self, reachable: bool, detail: str = "") -> None:
        self._snapshot = BackendStatusInfo(
            reachable=reachable,
            detail=detail,
            checked_at=datetime.now(UTC),
        )


async def probe_backend(client: JoplinClient, status: BackendStatus, delay: float = 1.0) -> bool:
    """Ping the backend once after ``delay`` seconds and record the result."""
    if delay > 0:
        await asyncio.sleep(delay)

    try:
        await client.ping()
    except BackendError as e:
        logger.warning(f"Failed to connect to Joplin: {e}")
        status.record(False, str(e))
        return False

    logger.info("Connected to Joplin successfully")
    status.record(True)
    return True


def start_liveness_probe(
    client: JoplinClient, status: BackendStatus, delay: float = 1.0
) -> asyncio.Task:
    """Schedule the one-shot probe in the background."""
    return asyncio.create_task(probe_backend(client, status, delay), name="joplin-liveness-probe")
