"""Backend services.

- joplin_client: HTTP client for the Joplin Web Clipper API
- liveness: one-shot backend reachability probe
"""

from .joplin_client import PING_SENTINEL, BackendRequest, JoplinClient
from .liveness import BackendStatus, probe_backend, start_liveness_probe

__all__ = [
    "BackendRequest",
    "JoplinClient",
    "PING_SENTINEL",
    "BackendStatus",
    "probe_backend",
    "start_liveness_probe",
]
