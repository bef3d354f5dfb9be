"""
Configuration system for the Carespace SDK.

Provides Pydantic-based configuration with defaults for the transport,
retry policy and logging, plus environment presets and loading from
``CARESPACE_*`` environment variables.
"""

from typing import Optional
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT_URL = "https://api-dev.carespace.ai"
STAGING_URL = "https://api-staging.carespace.ai"
PRODUCTION_URL = "https://api.carespace.ai"

DEFAULT_USER_AGENT = "CarespaceSDK/1.0.0 (Python)"


class TimeoutConfig(BaseModel):
    """HTTP timeout configuration."""

    connect: float = Field(default=30.0, gt=0, description="Connection timeout in seconds")
    read: float = Field(default=30.0, gt=0, description="Read timeout in seconds")
    write: float = Field(default=30.0, gt=0, description="Write timeout in seconds")
    pool: float = Field(default=30.0, gt=0, description="Pool timeout in seconds")

    @classmethod
    def uniform(cls, seconds: float) -> "TimeoutConfig":
        """Same timeout for every phase."""
        return cls(connect=seconds, read=seconds, write=seconds, pool=seconds)

    def to_httpx_timeout(self) -> httpx.Timeout:
        """Convert to httpx.Timeout object."""
        return httpx.Timeout(
            connect=self.connect, read=self.read, write=self.write, pool=self.pool
        )


class RetryConfig(BaseModel):
    """
    Retry logic configuration.

    ``max_retries`` counts retries on top of the first attempt. The wait
    before retry ``n`` is ``base_delay_seconds * multiplier ** (n - 1)``,
    capped at ``max_delay_seconds``.
    """

    enabled: bool = Field(default=True, description="Retry transient failures")
    max_retries: int = Field(default=3, ge=0, description="Maximum retry attempts")
    base_delay_seconds: float = Field(
        default=1.0, ge=0, description="Wait before the first retry"
    )
    max_delay_seconds: float = Field(
        default=30.0, ge=0, description="Maximum wait time between retries"
    )
    multiplier: float = Field(default=2.0, ge=1.0, description="Exponential backoff multiplier")
    jitter: bool = Field(default=False, description="Add random jitter to wait times")

    @model_validator(mode="after")
    def _check_delay_bounds(self) -> "RetryConfig":
        if self.max_delay_seconds < self.base_delay_seconds:
            raise ValueError("max_delay_seconds cannot be lower than base_delay_seconds")
        return self

    @property
    def max_attempts(self) -> int:
        """Total attempts including the first one."""
        return self.max_retries + 1 if self.enabled else 1


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)"
    )
    include_request_id: bool = Field(
        default=True, description="Include X-Request-ID in logs"
    )
    logger_name: str = Field(default="carespace_sdk", description="Logger name")

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class ClientConfig(BaseModel):
    """
    Complete configuration for the Carespace SDK.

    Use one of the presets for the hosted environments:

    ```python
    config = ClientConfig.for_production(api_key="sk_live_...")
    config = ClientConfig.for_development().with_headers({"X-Tenant": "acme"})
    ```

    Attributes:
        base_url: Base URL for all API requests
        api_key: Bearer token sent as ``Authorization: Bearer <api_key>``
        timeout: HTTP timeout configuration for all request phases
        retry: Exponential backoff retry behavior settings
        logging: Logger name and level for the SDK
        user_agent: User-Agent header for request identification
        default_headers: Extra headers sent with every request
        follow_redirects: Whether to automatically follow HTTP redirects
        verify_ssl: Whether to verify SSL certificates (disable only for testing)
    """

    base_url: str = Field(default=DEVELOPMENT_URL, description="Base URL for the API")
    api_key: Optional[str] = Field(default=None, description="API key / access token")
    timeout: TimeoutConfig = Field(default_factory=TimeoutConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header")
    default_headers: dict[str, str] = Field(default_factory=dict)
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")

    model_config = ConfigDict(extra="forbid")

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("base_url is required")
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("base_url must be an absolute http(s) URL")
        return v.rstrip("/")

    @field_validator("user_agent")
    @classmethod
    def _validate_user_agent(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("user_agent cannot be blank")
        return v

    @classmethod
    def for_development(cls, api_key: Optional[str] = None) -> "ClientConfig":
        """Development backend with verbose logging."""
        return cls(
            base_url=DEVELOPMENT_URL,
            api_key=api_key,
            logging=LoggingConfig(level="DEBUG"),
        )

    @classmethod
    def for_staging(cls, api_key: str) -> "ClientConfig":
        """Staging backend."""
        return cls(
            base_url=STAGING_URL, api_key=api_key, logging=LoggingConfig(level="INFO")
        )

    @classmethod
    def for_production(cls, api_key: str) -> "ClientConfig":
        """Production backend with quiet logging."""
        return cls(
            base_url=PRODUCTION_URL,
            api_key=api_key,
            logging=LoggingConfig(level="WARNING"),
        )

    @classmethod
    def from_env(cls, **overrides: object) -> "ClientConfig":
        """Build a config from ``CARESPACE_*`` environment variables."""
        return CarespaceSettings().to_client_config(**overrides)

    def with_api_key(self, api_key: Optional[str]) -> "ClientConfig":
        return self.model_copy(update={"api_key": api_key})

    def with_headers(self, headers: dict[str, str]) -> "ClientConfig":
        return self.model_copy(
            update={"default_headers": {**self.default_headers, **headers}}
        )


class CarespaceSettings(BaseSettings):
    """Environment-driven settings (``CARESPACE_`` prefix, optional ``.env``)."""

    base_url: str = Field(default=DEVELOPMENT_URL)
    api_key: Optional[str] = Field(default=None)
    timeout: float = Field(default=30.0, gt=0, description="Timeout in seconds")
    max_retries: int = Field(default=3, ge=0)
    retry_delay: float = Field(default=1.0, ge=0, description="Base retry delay in seconds")
    enable_retry: bool = Field(default=True)
    log_level: str = Field(default="INFO")
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    model_config = SettingsConfigDict(
        env_prefix="CARESPACE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_client_config(self, **overrides: object) -> ClientConfig:
        values: dict[str, object] = {
            "base_url": self.base_url,
            "api_key": self.api_key,
            "timeout": TimeoutConfig.uniform(self.timeout),
            "retry": RetryConfig(
                enabled=self.enable_retry,
                max_retries=self.max_retries,
                base_delay_seconds=self.retry_delay,
                max_delay_seconds=max(30.0, self.retry_delay),
            ),
            "logging": LoggingConfig(level=self.log_level),
            "user_agent": self.user_agent,
        }
        values.update(overrides)
        return ClientConfig(**values)  # type: ignore[arg-type]
