"""
HTTP transport for the Carespace SDK.

``CarespaceHttpClient`` owns a long-lived ``httpx.AsyncClient`` and runs
every request through bearer-token auth, the retry executor and the
status-code to exception mapping. Resource classes only ever talk to this
transport.
"""

import datetime
import email.utils
import enum
import logging
import time
import uuid
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from .config import ClientConfig
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
)
from .retry import RetryPolicy

REQUEST_ID_HEADER = "X-Request-ID"


def parse_retry_after(value: Optional[str], now: Optional[float] = None) -> Optional[float]:
    """
    Parse a ``Retry-After`` header into seconds.

    Accepts delta-seconds or an HTTP date. Dates in the past give 0.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    try:
        return max(0.0, float(value))
    except ValueError:
        pass
    try:
        retry_at = email.utils.parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at is None:
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=datetime.timezone.utc)
    current = time.time() if now is None else now
    return max(0.0, retry_at.timestamp() - current)


def encode_query_params(params: Optional[dict[str, Any]]) -> list[tuple[str, str]]:
    """
    Flatten query parameters the way the API expects them.

    ``None`` and empty strings are dropped, booleans become ``true``/``false``,
    enums use their value and sequences repeat the key.
    """
    if not params:
        return []

    def encode(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, enum.Enum):
            return str(value.value)
        return str(value)

    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, (list, tuple, set)):
            pairs.extend((key, encode(item)) for item in value if item is not None)
        else:
            pairs.append((key, encode(value)))
    return pairs


def encode_body(body: Any) -> Any:
    """Turn a request body into JSON-ready data."""
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True, by_alias=True)
    if isinstance(body, dict):
        return {k: encode_body(v) for k, v in body.items() if v is not None}
    if isinstance(body, (list, tuple)):
        return [encode_body(item) for item in body]
    if isinstance(body, enum.Enum):
        return body.value
    return body


def _request_of(source: Any) -> Optional[httpx.Request]:
    # httpx raises RuntimeError when no request is attached
    try:
        return source.request  # type: ignore[no-any-return]
    except RuntimeError:
        return None


def _error_message(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def _error_details(payload: Any) -> Optional[Any]:
    if isinstance(payload, dict):
        for key in ("errors", "details", "validation_errors"):
            if key in payload:
                return payload[key]
    return None


def map_status_error(response: httpx.Response) -> CarespaceError:
    """
    Map a non-2xx response to the SDK exception hierarchy.

    Args:
        response: The failed HTTP response

    Returns:
        Exception instance matching the status code
    """
    status_code = response.status_code
    try:
        payload: Any = response.json()
    except ValueError:
        payload = None
    message = _error_message(payload)
    request = _request_of(response)
    common: dict[str, Any] = {"response": response, "request": request}

    if status_code == 401:
        return AuthenticationError(message, **common)
    if status_code == 403:
        return AuthorizationError(message, **common)
    if status_code == 404:
        return NotFoundError(message, **common)
    if status_code in (400, 422):
        return CarespaceValidationError(
            message,
            status_code=status_code,
            error_details=_error_details(payload),
            **common,
        )
    if status_code == 429:
        return RateLimitError(
            message,
            retry_after=parse_retry_after(response.headers.get("Retry-After")),
            **common,
        )
    if status_code in (502, 503, 504):
        return ServiceUnavailableError(message, status_code=status_code, **common)
    if 500 <= status_code < 600:
        return CarespaceServerError(message, status_code=status_code, **common)
    return CarespaceStatusError(
        message or f"HTTP request failed with status {status_code}",
        status_code=status_code,
        error_details=_error_details(payload),
        **common,
    )


def map_transport_error(exc: httpx.HTTPError) -> CarespaceError:
    """Map an httpx transport failure to the SDK exception hierarchy."""
    request = _request_of(exc)
    if isinstance(exc, httpx.TimeoutException):
        return CarespaceTimeoutError(request=request)
    if isinstance(exc, httpx.TransportError):
        return CarespaceConnectionError(f"Network error: {exc}", request=request)
    return CarespaceError(f"HTTP client error: {exc}", request=request)


def decode_response(response: httpx.Response) -> Any:
    """Decode a successful response: JSON, text, or None when empty."""
    if response.status_code == 204 or not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError as e:
            raise CarespaceError(
                "Invalid JSON response",
                status_code=response.status_code,
                response=response,
                request=_request_of(response),
            ) from e
    return response.text


class CarespaceHttpClient:
    """
    Asynchronous HTTP transport for the Carespace API.

    Features:
    - Long-lived httpx.AsyncClient with connection pooling
    - Bearer-token auth that can be swapped at runtime
    - Exponential backoff retries on network errors, timeouts and 5xx
    - One X-Request-ID per logical request, reused across retries
    - Status-code driven exception mapping
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._retry_policy = retry_policy or RetryPolicy(config.retry)
        self._closed = False

        self._headers: dict[str, str] = {
            "User-Agent": config.user_agent,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        self._headers.update(config.default_headers)
        self._api_key: Optional[str] = None
        if config.api_key:
            self.set_api_key(config.api_key)

        self.logger = logging.getLogger(config.logging.logger_name)
        self.logger.setLevel(getattr(logging, config.logging.level.upper()))

    async def __aenter__(self) -> "CarespaceHttpClient":
        self._ensure_initialized()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def headers(self) -> dict[str, str]:
        """Copy of the headers sent with every request."""
        return dict(self._headers)

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_initialized(self) -> httpx.AsyncClient:
        if self._closed:
            raise RuntimeError("CarespaceHttpClient is closed")
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout.to_httpx_timeout(),
                follow_redirects=self.config.follow_redirects,
                verify=self.config.verify_ssl,
                transport=self._transport,
            )
            self.logger.info(
                f"CarespaceHttpClient initialized with base_url={self.config.base_url}"
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        if self._closed:
            return
        self._closed = True
        if self._client is not None:
            await self._client.aclose()
            self.logger.info("CarespaceHttpClient closed")

    def set_api_key(self, api_key: Optional[str]) -> None:
        """Set the bearer token; a blank value removes authentication."""
        self.remove_default_header("Authorization")
        if api_key is None or not api_key.strip():
            self._api_key = None
            return
        self._api_key = api_key.strip()
        self._headers["Authorization"] = f"Bearer {self._api_key}"

    def set_default_header(self, name: str, value: str) -> None:
        self.remove_default_header(name)
        self._headers[name] = value

    def remove_default_header(self, name: str) -> None:
        for existing in [h for h in self._headers if h.lower() == name.lower()]:
            del self._headers[existing]

    async def _send_once(
        self,
        method: str,
        path: str,
        request_id: str,
        params: list[tuple[str, str]],
        json_body: Any,
        headers: Optional[dict[str, str]],
    ) -> httpx.Response:
        client = self._ensure_initialized()
        request_headers = dict(self._headers)
        if headers:
            request_headers.update(headers)
        request_headers[REQUEST_ID_HEADER] = request_id

        kwargs: dict[str, Any] = {"headers": request_headers}
        if params:
            kwargs["params"] = params
        if json_body is not None:
            kwargs["json"] = json_body

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise map_transport_error(e) from e

        if response.is_success:
            self.logger.debug(
                f"HTTP {method} {response.url} [{request_id}] succeeded "
                f"with status {response.status_code}"
            )
            return response

        await response.aread()
        self.logger.error(
            f"HTTP {method} {response.url} [{request_id}] failed "
            f"with status {response.status_code}"
        )
        raise map_status_error(response)

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        headers: Optional[dict[str, str]] = None,
        request_id: Optional[str] = None,
    ) -> httpx.Response:
        """
        Send a request through the retry executor and return the raw response.

        Raises:
            Various CarespaceError subclasses based on failure type
        """
        method = method.upper()
        if request_id is None:
            request_id = str(uuid.uuid4())
            if self.config.logging.include_request_id:
                self.logger.debug(
                    f"Generated request id [{request_id}] for {method} {path}"
                )

        encoded_params = encode_query_params(params)
        json_body = encode_body(json)

        async def attempt() -> httpx.Response:
            return await self._send_once(
                method, path, request_id, encoded_params, json_body, headers
            )

        return await self._retry_policy.execute(attempt, request_id)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        headers: Optional[dict[str, str]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """
        Make a request and return the decoded body.

        Args:
            method: HTTP method
            path: Path relative to the configured base URL
            params: Query parameters
            json: Request body (dict, list or pydantic model)
            headers: Extra headers for this request only
            request_id: Optional request ID (auto-generated if not provided)

        Returns:
            Decoded JSON, response text, or None for empty bodies
        """
        response = await self.send(
            method,
            path,
            params=params,
            json=json,
            headers=headers,
            request_id=request_id,
        )
        return decode_response(response)

    async def get(self, path: str, *, params: Optional[dict[str, Any]] = None, **kwargs: Any) -> Any:
        return await self.request("GET", path, params=params, **kwargs)

    async def post(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        return await self.request("POST", path, json=json, **kwargs)

    async def put(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        return await self.request("PUT", path, json=json, **kwargs)

    async def patch(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        return await self.request("PATCH", path, json=json, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)
