from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from loguru import logger
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console

__all__ = ["ClientConfig", "DEFAULT_USER_AGENT", "Settings", "get_settings"]

console = Console()
log = logger.bind(module="config")

DEFAULT_USER_AGENT = "arrkit"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Connection details injected into a client at construction.

    Immutable so one instance can be shared by concurrent callers.
    """

    url: str
    api_key: str
    timeout_seconds: float = 30.0
    http_user: str | None = None
    http_pass: str | None = None
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True
    reuse_connections: bool = False

    def __post_init__(self) -> None:
        if not (self.url or "").strip():
            raise ValueError("Invalid base URL: value is empty.")

    @property
    def basic_auth(self) -> tuple[str, str] | None:
        """HTTP basic credentials for backends placed behind a proxy."""
        if not self.http_user:
            return None
        return (self.http_user, self.http_pass or "")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(url={self.url!r}, api_key='***', "
            f"timeout_seconds={self.timeout_seconds!r}, http_user={self.http_user!r})"
        )


class Settings(BaseSettings):
    """Environment-driven configuration for scripts and applications."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    url: str = Field(default="http://localhost:7878", alias="ARR_URL")
    api_key: SecretStr = Field(default=SecretStr(""), alias="ARR_API_KEY")
    timeout_seconds: float = Field(default=30.0, alias="ARR_TIMEOUT_SECONDS")
    http_user: str | None = Field(default=None, alias="ARR_HTTP_USER")
    http_pass: SecretStr | None = Field(default=None, alias="ARR_HTTP_PASS")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="ARR_USER_AGENT")
    reuse_connections: bool = Field(default=False, alias="ARR_REUSE_CONNECTIONS")
    log_level: str = Field(default="INFO", alias="ARR_LOG_LEVEL")

    def client_config(self) -> ClientConfig:
        """Return the immutable client configuration for these settings."""
        return ClientConfig(
            url=self.url,
            api_key=self.api_key.get_secret_value(),
            timeout_seconds=self.timeout_seconds,
            http_user=self.http_user,
            http_pass=self.http_pass.get_secret_value() if self.http_pass else None,
            user_agent=self.user_agent,
            reuse_connections=self.reuse_connections,
        )

    def export_safe(self) -> dict[str, Any]:
        """Return non-sensitive settings for debugging/logging."""
        return {
            "url": self.url,
            "api_key_set": bool(self.api_key.get_secret_value()),
            "timeout_seconds": self.timeout_seconds,
            "http_user": self.http_user,
            "user_agent": self.user_agent,
            "reuse_connections": self.reuse_connections,
            "log_level": self.log_level,
        }


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""
    settings = Settings()
    console.log(f"[bold green]Loaded settings[/] url={settings.url!r}")
    log.info("Settings initialised: {}", settings.export_safe())
    return settings
