"""Configuration for the Joplin MCP Server.

Settings are resolved once at startup and passed explicitly to the components
that need them. Sources, highest priority first:

    1. JSON config file (``config.json`` or ``JOPLIN_MCP_CONFIG_FILE``)
    2. Environment variables prefixed with ``JOPLIN_MCP_``
    3. Built-in defaults

A missing or unreadable config file is not an error: the server starts with
environment values and defaults.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"
CONFIG_FILE_ENV = "JOPLIN_MCP_CONFIG_FILE"

# Key names written by earlier releases of the tray application
LEGACY_KEYS = {
    "joplin_port": "backend_port",
    "joplin_token": "backend_token",
    "mcp_port": "adapter_port",
}

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Connection and runtime settings. Read-only after startup."""

    model_config = SettingsConfigDict(
        env_prefix="JOPLIN_MCP_",
        extra="ignore",
        frozen=True,
    )

    # Joplin Web Clipper service
    backend_host: str = "localhost"
    backend_port: int = 41184
    backend_token: str = ""
    request_timeout: float = 30.0

    # MCP HTTP listener
    adapter_host: str = "127.0.0.1"
    adapter_port: int = 3000

    # Delay before the one-shot backend liveness probe
    liveness_delay_seconds: float = 1.0

    log_level: LogLevel = "INFO"
    debug: bool = False
    environment: str = "development"
    sentry_dsn: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @property
    def backend_url(self) -> str:
        return f"http://{self.backend_host}:{self.backend_port}"


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read the JSON config file, returning an empty dict when unusable."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"Config file {path} not found, using defaults")
        return {}
    except OSError as e:
        logger.warning(f"Could not read config file {path}: {e}")
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Config file {path} is not valid JSON: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Config file {path} must contain a JSON object, ignoring it")
        return {}

    values: dict[str, Any] = {}
    for key, value in data.items():
        values[LEGACY_KEYS.get(key, key)] = value
    return values


def _environment_settings() -> Settings:
    """Settings from environment variables and defaults only."""
    try:
        return Settings()
    except ValidationError as e:
        logger.warning(f"Invalid JOPLIN_MCP_ environment values, using defaults: {e}")
        return Settings.model_construct()


def load_settings(config_file: str | Path | None = None) -> Settings:
    """Load settings from the config file, environment and defaults.

    The environment and the file are validated separately, so a bad value in
    one source only discards that source.
    """
    path = Path(config_file or os.getenv(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE))
    file_values = _read_config_file(path)
    base = _environment_settings()
    if not file_values:
        return base

    # Every field is passed explicitly, so the environment is not read again
    try:
        return Settings(**{**base.model_dump(), **file_values})
    except ValidationError as e:
        logger.warning(f"Invalid values in config file {path}, ignoring it: {e}")
        return base
