"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without putting
  parsing logic in the CLI.
- The HTTP adapters and the pipeline read one validated contract.

Overrides come from `GETSINKS_*` variables, a project `.env` or the per-user
`.env` returned by `get_user_env_file()`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "0.1.0"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "getsinks"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "getsinks"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "getsinks"
    return Path.home() / ".config" / "getsinks"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Every field can be overridden with a `GETSINKS_`-prefixed environment
    variable or a `.env` file (project first, then the per-user file).
    """

    model_config = SettingsConfigDict(
        env_prefix="GETSINKS_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    resource_manager_base_url: str = Field(
        default="https://cloudresourcemanager.googleapis.com",
        min_length=8,
        description="Base URL of the Cloud Resource Manager API (v3 search endpoints).",
    )
    logging_base_url: str = Field(
        default="https://logging.googleapis.com",
        min_length=8,
        description="Base URL of the Cloud Logging API (v2 sinks endpoints).",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. None waits indefinitely.",
    )
    user_agent: str = Field(
        default=f"getsinks/{APP_VERSION}",
        min_length=1,
        description="User-Agent sent with every API request.",
    )

    max_concurrency: int | None = Field(
        default=None,
        ge=1,
        le=10_000,
        description="Maximum in-flight sink requests. None launches one request per node at once.",
    )
