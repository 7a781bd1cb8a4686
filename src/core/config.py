"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP client, resolver factory) read config consistently.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.repositories import DEFAULT_REPOSITORY_URLS


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "artifact-age"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "artifact-age"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "artifact-age"
    return Path.home() / ".config" / "artifact-age"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Repositories are probed in the order listed here; the default order
    follows observed coverage (Maven Central first).
    """

    model_config = SettingsConfigDict(
        env_prefix="ARTIFACT_AGE_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the per-user one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    connect_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Connect timeout per repository probe (seconds).",
    )
    read_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Read timeout per repository probe (seconds).",
    )
    user_agent: str = Field(
        default="artifact-age/0.1",
        min_length=1,
        description="User-Agent sent with every probe.",
    )
    repositories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REPOSITORY_URLS),
        min_length=1,
        description="Ordered repository base URLs (highest priority first).",
    )
    descriptor_extension: str = Field(
        default="pom",
        min_length=1,
        description="Extension of the descriptor file whose timestamp is read.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level
