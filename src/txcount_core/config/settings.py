"""Application settings using pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal
from urllib.parse import quote

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from txcount_core.constants import MAINNET_BETA_RPC_URL


class Settings(BaseSettings):
    """Central configuration for the transaction counter.

    Environment variables carry no prefix so that the conventional
    ``SOLANA_RPC_URL`` / ``REDIS_HOST`` / ``PORT`` names apply directly.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # --- Solana RPC ---
    solana_rpc_url: str = Field(
        default=MAINNET_BETA_RPC_URL,
        description="Solana JSON-RPC endpoint URL",
    )
    rpc_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per RPC request in seconds",
    )

    # --- Cache ---
    cache_backend: Literal["redis", "disk"] = Field(
        default="redis",
        description="Cache backend: 'redis' for shared cache, 'disk' for zero-infra",
    )
    redis_host: str = Field(
        default="localhost",
        description="Redis server hostname",
    )
    redis_port: int = Field(
        default=6379,
        ge=1,
        le=65535,
        description="Redis server port",
    )
    redis_password: SecretStr | None = Field(
        default=None,
        description="Redis password (optional)",
    )
    redis_db: int = Field(
        default=0,
        ge=0,
        description="Redis logical database index",
    )
    cache_dir: Path = Field(
        default=Path("./.cache/txcount"),
        description="Directory for diskcache persistent cache",
    )

    # --- API ---
    api_host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
    )
    api_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "API_PORT"),
        description="Port the HTTP server listens on",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
    public_api_url: str = Field(
        default="",
        validation_alias=AliasChoices("NEXT_PUBLIC_API_URL", "PUBLIC_API_URL"),
        description="API base URL used by the form client (empty = same origin)",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for collectors",
    )

    @property
    def redis_url(self) -> str:
        """Build a redis:// URL from the host/port/password/db fields."""
        auth = ""
        if self.redis_password is not None:
            auth = f":{quote(self.redis_password.get_secret_value(), safe='')}@"
        return f"redis://{auth}{self.redis_host}:{self.redis_port}/{self.redis_db}"
