"""Response models for the Joplin MCP Server."""

from datetime import datetime

from pydantic import BaseModel, Field


class ToolResult(BaseModel):
    """Text produced by a tool, ready to wrap into an MCP content block."""

    text: str = Field(..., description="Raw backend payload or confirmation message")


class BackendStatusInfo(BaseModel):
    """Outcome of the most recent backend liveness probe."""

    reachable: bool | None = Field(
        default=None, description="None until the first probe has completed"
    )
    detail: str = Field(default="", description="Probe failure reason, empty on success")
    checked_at: datetime | None = Field(default=None, description="When the probe finished")


class HealthResponse(BaseModel):
    """Response body of GET /health."""

    status: str
    version: str
    timestamp: datetime
    backend: BackendStatusInfo
