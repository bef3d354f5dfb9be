"""
Carespace Python SDK

Asynchronous client for the Carespace REST API with bearer-token auth,
bounded exponential-backoff retries and a typed exception hierarchy.
"""

from .client import CarespaceClient, create_carespace_client
from .config import (
    DEVELOPMENT_URL,
    PRODUCTION_URL,
    STAGING_URL,
    CarespaceSettings,
    ClientConfig,
    LoggingConfig,
    RetryConfig,
    TimeoutConfig,
)
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    CarespaceConnectionError,
    CarespaceError,
    CarespaceServerError,
    CarespaceStatusError,
    CarespaceTimeoutError,
    CarespaceValidationError,
    NotFoundError,
    RateLimitError,
    ServiceUnavailableError,
    is_retryable,
)
from .http import CarespaceHttpClient
from .retry import RetryPolicy

__all__ = [
    "CarespaceClient",
    "create_carespace_client",
    "CarespaceHttpClient",
    "RetryPolicy",
    "ClientConfig",
    "TimeoutConfig",
    "RetryConfig",
    "LoggingConfig",
    "CarespaceSettings",
    "DEVELOPMENT_URL",
    "STAGING_URL",
    "PRODUCTION_URL",
    "CarespaceError",
    "CarespaceConnectionError",
    "CarespaceTimeoutError",
    "CarespaceServerError",
    "ServiceUnavailableError",
    "CarespaceStatusError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "CarespaceValidationError",
    "RateLimitError",
    "is_retryable",
]

__version__ = "1.0.0"
