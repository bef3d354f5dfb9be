"""
Exception hierarchy for the Carespace SDK.

Every error raised by the SDK derives from ``CarespaceError``. The tree is
split in two so that retry decisions can be made on type alone:

```
CarespaceError
├── CarespaceConnectionError (retryable - network, timeouts, 5xx)
│   ├── CarespaceTimeoutError (client-side timeouts)
│   └── CarespaceServerError (5xx)
│       └── ServiceUnavailableError (502, 503, 504)
└── CarespaceStatusError (non-retryable - the request itself is wrong)
    ├── AuthenticationError (401)
    ├── AuthorizationError (403)
    ├── NotFoundError (404)
    ├── CarespaceValidationError (400, 422)
    └── RateLimitError (429)
```

**Exception Handling Strategy:**

```python
try:
    user = await client.users.get_user("usr_123")
except NotFoundError:
    log.info("User does not exist")
except AuthenticationError:
    log.error("Check the API key")
except CarespaceConnectionError:
    # Already retried by the transport
    raise
```
"""

from typing import Any, Optional


class CarespaceError(Exception):
    """
    Base exception for all SDK errors.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status code (if the server answered)
        error_code: Stable machine-readable code, e.g. ``RESOURCE_NOT_FOUND``
        error_details: Extra payload from the error body (validation errors)
        response: HTTP response object (if available)
        request: HTTP request object (if available)
    """

    default_message = "Carespace API request failed."
    default_error_code: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        error_details: Optional[Any] = None,
        response: Optional[Any] = None,
        request: Optional[Any] = None,
    ):
        self.message = message or self.default_message
        self.status_code = status_code
        self.error_code = error_code or self.default_error_code
        self.error_details = error_details
        self.response = response
        self.request = request
        super().__init__(self.message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, error_code={self.error_code!r})"
        )


class CarespaceConnectionError(CarespaceError):
    """
    Base for all retryable errors.

    Network failures, timeouts and 5xx responses land here. The transport
    retries these with exponential backoff before surfacing them.
    """

    default_message = "Network error occurred. Please check your internet connection."
    default_error_code = "NETWORK_ERROR"


class CarespaceTimeoutError(CarespaceConnectionError):
    """The request timed out on the client side."""

    default_message = "Request timed out. Please try again."
    default_error_code = "TIMEOUT_ERROR"


class CarespaceServerError(CarespaceConnectionError):
    """
    The server answered with a 5xx status.

    ``status_code`` holds the actual code; 500 is assumed when the error is
    built without one.
    """

    default_message = "Internal server error occurred."
    default_error_code = "SERVER_ERROR"

    def __init__(self, message: Optional[str] = None, **kwargs: Any):
        kwargs.setdefault("status_code", 500)
        super().__init__(message, **kwargs)


class ServiceUnavailableError(CarespaceServerError):
    """The server or a gateway in front of it is unavailable (502, 503, 504)."""

    default_message = "Service temporarily unavailable."

    def __init__(self, message: Optional[str] = None, **kwargs: Any):
        kwargs.setdefault("status_code", 503)
        super().__init__(message, **kwargs)


class CarespaceStatusError(CarespaceError):
    """
    Base for non-retryable HTTP status errors.

    Retrying without changing the request would produce the same answer.
    Raised directly for statuses without a dedicated subclass.
    """

    default_status_code: Optional[int] = None

    def __init__(self, message: Optional[str] = None, **kwargs: Any):
        if self.default_status_code is not None:
            kwargs.setdefault("status_code", self.default_status_code)
        super().__init__(message, **kwargs)


class AuthenticationError(CarespaceStatusError):
    """
    The request was not authenticated (HTTP 401).

    Usually a missing, expired or mistyped API key / access token.
    """

    default_message = "Authentication failed. Please check your API key."
    default_error_code = "AUTHENTICATION_FAILED"
    default_status_code = 401


class AuthorizationError(CarespaceStatusError):
    """Valid credentials but insufficient permissions (HTTP 403)."""

    default_message = (
        "Access denied. You don't have permission to access this resource."
    )
    default_error_code = "AUTHORIZATION_FAILED"
    default_status_code = 403


class NotFoundError(CarespaceStatusError):
    """The requested resource was not found (HTTP 404)."""

    default_message = "The requested resource was not found."
    default_error_code = "RESOURCE_NOT_FOUND"
    default_status_code = 404


class CarespaceValidationError(CarespaceStatusError):
    """
    The request was rejected as invalid (HTTP 400, 422).

    ``error_details`` carries the ``errors`` / ``details`` field of the
    response body when the server sends one.
    """

    default_message = "Bad request. Please check your request data."
    default_error_code = "VALIDATION_FAILED"
    default_status_code = 400


class RateLimitError(CarespaceStatusError):
    """
    Too many requests (HTTP 429).

    Not retried automatically. ``retry_after`` is the server's
    ``Retry-After`` hint in seconds, or ``None`` when absent.
    """

    default_message = "Rate limit exceeded. Please try again later."
    default_error_code = "RATE_LIMIT_EXCEEDED"
    default_status_code = 429

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        retry_after: Optional[float] = None,
        **kwargs: Any,
    ):
        self.retry_after = retry_after
        super().__init__(message, **kwargs)


def is_retryable(exc: BaseException) -> bool:
    """Return True when ``exc`` is a transient failure worth retrying."""
    return isinstance(exc, CarespaceConnectionError)
