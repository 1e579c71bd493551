"""
Application settings with environment variable support.

Uses Pydantic Settings for type-safe configuration with automatic
environment variable loading and validation.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mev_academy.config.constants import (
    DEFAULT_EXPLORER_REQUESTS_PER_SECOND,
    DEFAULT_HTTP_RETRY_ATTEMPTS,
    DEFAULT_HTTP_RETRY_BACKOFF,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_RATE_LIMIT_REQUESTS,
    DEFAULT_RATE_LIMIT_WINDOW,
    EXPLORER_BASE_URL,
    EXPLORER_CHAIN_ID,
    UNISWAP_V2_SUBGRAPH_URL,
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    The explorer API key uses SecretStr for safe handling.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # External Data Sources
    # =========================================================================

    etherscan_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Block explorer API key",
    )

    explorer_base_url: str = Field(
        default=EXPLORER_BASE_URL,
        description="Block explorer API endpoint",
    )

    explorer_chain_id: int = Field(
        default=EXPLORER_CHAIN_ID,
        ge=1,
        description="Chain id passed to the explorer API",
    )

    subgraph_url: str = Field(
        default=UNISWAP_V2_SUBGRAPH_URL,
        description="GraphQL endpoint serving pool swaps",
    )

    explorer_requests_per_second: int = Field(
        default=DEFAULT_EXPLORER_REQUESTS_PER_SECOND,
        ge=1,
        le=100,
        description="Outbound explorer request budget",
    )

    # =========================================================================
    # Outbound HTTP Policy
    # =========================================================================

    http_timeout_seconds: float = Field(
        default=DEFAULT_HTTP_TIMEOUT,
        gt=0.0,
        le=120.0,
        description="Total timeout for a single outbound request",
    )

    http_retry_attempts: int = Field(
        default=DEFAULT_HTTP_RETRY_ATTEMPTS,
        ge=0,
        le=5,
        description="Retries after the first failed outbound attempt",
    )

    http_retry_backoff_seconds: float = Field(
        default=DEFAULT_HTTP_RETRY_BACKOFF,
        ge=0.0,
        le=30.0,
        description="Base delay before a retry, doubled per attempt",
    )

    # =========================================================================
    # Server
    # =========================================================================

    host: str = Field(default="0.0.0.0", description="Listen address")

    port: int = Field(default=3001, ge=1, le=65535, description="Listen port")

    frontend_url: str = Field(
        default="http://localhost:3000",
        description="Origin allowed by CORS",
    )

    environment: str = Field(
        default="development",
        description="Deployment environment reported by the health probe",
    )

    rate_limit_requests: int = Field(
        default=DEFAULT_RATE_LIMIT_REQUESTS,
        ge=0,
        description="Requests allowed per client per window (0 disables)",
    )

    rate_limit_window_seconds: float = Field(
        default=DEFAULT_RATE_LIMIT_WINDOW,
        gt=0.0,
        description="Inbound rate limit window",
    )

    # =========================================================================
    # Operation Mode
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives every log record",
    )

    use_uvloop: bool = Field(
        default=True,
        description="Use uvloop for improved async performance",
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("explorer_base_url", "subgraph_url", "frontend_url", mode="after")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure URLs carry a scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL must start with http:// or https://: {v}")
        return v.rstrip("/")

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def explorer_api_key(self) -> str:
        """Plain explorer key for request parameters."""
        return self.etherscan_api_key.get_secret_value()

    @property
    def rate_limit_enabled(self) -> bool:
        return self.rate_limit_requests > 0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded only once.
    Clear cache with `get_settings.cache_clear()` if needed.
    """
    return Settings()
