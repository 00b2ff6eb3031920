"""FastAPI MCP Server for Joplin."""

import asyncio
import contextlib
import logging
import re
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Annotated, Any

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from . import __version__
from .api.deps import get_backend_status
from .config import Settings, load_settings
from .engine import ToolExecutor
from .mcp_transport import router as mcp_router
from .middleware import RequestContextMiddleware
from .models import HealthResponse
from .services import BackendStatus, JoplinClient, start_liveness_probe

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ============ SENTRY INITIALIZATION ============

# Outbound Joplin URLs carry the API token as a query parameter
_TOKEN_PARAM = re.compile(r"(token=)[^&#\s]*")


def _redact_token(value: Any) -> Any:
    if isinstance(value, str):
        return _TOKEN_PARAM.sub(r"\1[REDACTED]", value)
    return value


def _scrub_data(data: dict | None) -> None:
    if data:
        for key, value in data.items():
            data[key] = _redact_token(value)


def _filter_sentry_breadcrumb(crumb: dict, hint: Any = None) -> dict:
    """Remove the Joplin token from httpx breadcrumbs (url, http.query)."""
    _scrub_data(crumb.get("data"))
    return crumb


def _filter_sentry_event(event: dict, hint: Any = None) -> dict:
    """Remove the Joplin token from Sentry events and transactions."""
    request = event.get("request")
    if request and "query_string" in request:
        request["query_string"] = "[REDACTED]"

    crumbs = event.get("breadcrumbs") or []
    if isinstance(crumbs, dict):
        crumbs = crumbs.get("values") or []
    for crumb in crumbs:
        _filter_sentry_breadcrumb(crumb)

    for span in event.get("spans") or []:
        _scrub_data(span.get("data"))
        if "description" in span:
            span["description"] = _redact_token(span["description"])
    return event


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry if a DSN is configured."""
    if not settings.sentry_dsn:
        logger.debug("Sentry DSN not configured - error tracking disabled")
        return
    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.starlette import StarletteIntegration

        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
            integrations=[
                FastApiIntegration(),
                StarletteIntegration(),
            ],
            before_send=_filter_sentry_event,
            before_send_transaction=_filter_sentry_event,
            before_breadcrumb=_filter_sentry_breadcrumb,
        )
        logger.info("Sentry error tracking initialized")
    except ImportError:
        logger.warning("Sentry DSN configured but sentry-sdk not installed")


# ============ APPLICATION FACTORY ============


def create_app(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings resolved once at startup
        transport: Optional httpx transport for the backend client (tests)

    Returns:
        Configured FastAPI application
    """
    _init_sentry(settings)

    client = JoplinClient.from_settings(settings, transport=transport)
    backend_status = BackendStatus()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown."""
        logger.info(f"Starting Joplin MCP Server v{__version__} (backend {settings.backend_url})")
        if not settings.backend_token:
            logger.warning("No Joplin API token configured; authenticated endpoints will fail")

        probe = start_liveness_probe(client, backend_status, settings.liveness_delay_seconds)
        yield
        # Shutdown
        probe.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await probe
        await client.aclose()
        logger.info("Shutting down Joplin MCP Server")

    app = FastAPI(
        title="Joplin MCP Server",
        description="MCP tools endpoint for the Joplin Web Clipper API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.executor = ToolExecutor(client)
    app.state.backend_status = backend_status

    app.add_middleware(RequestContextMiddleware)
    app.include_router(mcp_router)

    # ============ EXCEPTION HANDLERS ============

    # Starlette's HTTPException also covers the router's own 404 and 405
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent response format."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with sanitized error messages."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "An internal server error occurred. Please try again.",
            },
        )

    # ============ HEALTH ENDPOINTS ============

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(
        status: Annotated[BackendStatus, Depends(get_backend_status)],
    ) -> HealthResponse:
        """Liveness of the adapter plus the last backend probe result."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            backend=status.snapshot,
        )

    return app


# ============ MAIN ============


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # httpx logs full URLs at INFO, which would include the Joplin token
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main():
    """Run the server with uvicorn."""
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info(f"MCP Server listening on {settings.adapter_host}:{settings.adapter_port}")

    uvicorn.run(
        create_app(settings),
        host=settings.adapter_host,
        port=settings.adapter_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
