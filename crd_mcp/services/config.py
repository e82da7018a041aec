"""Application configuration helpers."""

from __future__ import annotations

from functools import lru_cache
import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .. import __version__

DEFAULT_API_BASE_URL = "https://crd.ndl.go.jp/api/refsearch"
DEFAULT_USER_AGENT = f"crd-mcp/{__version__}"
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class AppConfig(BaseModel):
    """Runtime configuration loaded from environment variables."""

    model_config = ConfigDict(frozen=True)

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="CRD reference search endpoint",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent sent with every request",
    )
    http_timeout: float = Field(
        default=30.0,
        gt=0,
        description="httpx transport timeout in seconds",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("api_base_url", mode="before")
    @classmethod
    def _normalize_base_url(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise ValueError("CRD_API_BASE_URL cannot be empty")
        cleaned = value.strip().rstrip("/")
        if not cleaned.startswith(("http://", "https://")):
            raise ValueError("CRD_API_BASE_URL must be an http(s) URL")
        return cleaned

    @field_validator("user_agent", mode="before")
    @classmethod
    def _ensure_user_agent(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            return DEFAULT_USER_AGENT
        return value.strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Optional[str]) -> str:
        level = (value or "INFO").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"CRD_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def _read_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Load and cache application configuration."""
    return AppConfig(
        api_base_url=_read_env("CRD_API_BASE_URL", DEFAULT_API_BASE_URL),
        user_agent=_read_env("CRD_USER_AGENT"),
        http_timeout=_read_env("CRD_HTTP_TIMEOUT", "30"),
        log_level=_read_env("CRD_LOG_LEVEL", "INFO"),
    )


def reload_config() -> AppConfig:
    """Clear cached config (useful for tests) and reload."""
    get_config.cache_clear()
    return get_config()


__all__ = [
    "AppConfig",
    "get_config",
    "reload_config",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_USER_AGENT",
]
