from __future__ import annotations

import sys
from functools import lru_cache
from typing import Any

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console

from bangumi import __version__

console = Console(stderr=True)
log = logger.bind(module="config")

DEFAULT_BASE_URL = "https://api.bgm.tv"
DEFAULT_USER_AGENT = f"bangumi-client-python/{__version__}"


class Settings(BaseSettings):
    """Client configuration loaded from the environment (and `.env`)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="BANGUMI_BASE_URL")
    user_agent: str | None = Field(default=DEFAULT_USER_AGENT, alias="BANGUMI_USER_AGENT")
    # Never defaulted: requests stay anonymous unless a token is supplied.
    access_token: str | None = Field(default=None, alias="BANGUMI_ACCESS_TOKEN")
    timeout_seconds: float = Field(default=10.0, alias="BANGUMI_TIMEOUT_SECONDS")
    follow_redirects: bool = Field(default=True, alias="BANGUMI_FOLLOW_REDIRECTS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def export_safe(self) -> dict[str, Any]:
        """Return non-sensitive settings for debugging/logging."""
        return {
            "base_url": self.base_url,
            "user_agent": self.user_agent,
            "has_access_token": bool(self.access_token),
            "timeout_seconds": self.timeout_seconds,
            "follow_redirects": self.follow_redirects,
            "log_level": self.log_level,
        }


@lru_cache
def get_settings() -> Settings:
    """Load and cache client settings."""
    settings = Settings()
    console.log(
        f"[bold green]Loaded settings[/] base_url={settings.base_url!r} "
        f"authenticated={bool(settings.access_token)}",
    )
    log.info("Settings initialised: {}", settings.export_safe())
    return settings


_handler_id: int | None = None


def configure_logging(settings: Settings | None = None) -> int:
    """Route this package's Loguru output to stderr at `Settings.log_level`.

    The package logger is disabled on import (see `bangumi/__init__.py`); calling
    this is the opt-in for applications that want client logs. Sinks owned by
    the host application are left alone; calling it again replaces only the
    sink added by the previous call. Returns the Loguru handler id.
    """

    global _handler_id

    settings = settings or get_settings()
    level = (settings.log_level or "INFO").upper()

    if _handler_id is not None:
        logger.remove(_handler_id)
        _handler_id = None
    _handler_id = logger.add(
        sys.stderr,
        level=level,
        filter="bangumi",
        backtrace=False,
        diagnose=False,
    )
    logger.enable("bangumi")

    log.info("Logging initialised at level {}", level)
    return _handler_id
