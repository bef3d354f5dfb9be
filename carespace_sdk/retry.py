"""
Retry executor for the Carespace transport.

Bounded exponential-backoff retry built on tenacity. Only errors for which
``is_retryable`` holds (network failures, timeouts, 5xx) are retried; the
last mapped exception is re-raised once attempts run out.
"""

import logging
import uuid
from collections.abc import Awaitable
from typing import Any, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_random_exponential,
)

from .config import RetryConfig
from .exceptions import is_retryable

T = TypeVar("T")

logger = logging.getLogger(__name__)


def backoff_delay(config: RetryConfig, retry_number: int) -> float:
    """
    Deterministic wait before retry ``retry_number`` (1-based).

    Mirrors what the tenacity wait strategy produces when jitter is off.
    """
    if retry_number < 1:
        raise ValueError("retry_number starts at 1")
    delay = config.base_delay_seconds * config.multiplier ** (retry_number - 1)
    return min(delay, config.max_delay_seconds)


def build_wait_strategy(config: RetryConfig) -> Any:
    if config.jitter:
        return wait_random_exponential(
            multiplier=config.base_delay_seconds,
            exp_base=config.multiplier,
            max=config.max_delay_seconds,
        )
    return wait_exponential(
        multiplier=config.base_delay_seconds,
        exp_base=config.multiplier,
        min=0,
        max=config.max_delay_seconds,
    )


def create_retrying(
    config: RetryConfig,
    request_id: Optional[str] = None,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> AsyncRetrying:
    """
    Create a tenacity ``AsyncRetrying`` controller for one logical request.

    Args:
        config: Retry configuration
        request_id: Request ID used to correlate attempts in the logs
        sleep: Optional replacement for ``asyncio.sleep`` (tests)

    Returns:
        Configured AsyncRetrying instance
    """
    if request_id is None:
        request_id = str(uuid.uuid4())

    def log_retry_attempt(retry_state: RetryCallState) -> None:
        if retry_state.outcome is None or not retry_state.outcome.failed:
            return
        exception = retry_state.outcome.exception()
        next_wait = retry_state.next_action.sleep if retry_state.next_action else 0
        logger.warning(
            f"Request [{request_id}] failed with "
            f"[{type(exception).__name__}: {exception}]. "
            f"Retrying in {next_wait:.2f} seconds "
            f"(Attempt {retry_state.attempt_number} of {config.max_attempts})"
        )

    kwargs: dict[str, Any] = {
        "retry": retry_if_exception(is_retryable),
        "stop": stop_after_attempt(config.max_attempts),
        "wait": build_wait_strategy(config),
        "before_sleep": log_retry_attempt,
        "reraise": True,
    }
    if sleep is not None:
        kwargs["sleep"] = sleep
    return AsyncRetrying(**kwargs)


class RetryPolicy:
    """
    Applies the configured retry behavior to async operations.

    ```python
    policy = RetryPolicy(RetryConfig(max_retries=2))
    result = await policy.execute(fetch, request_id="abc")
    ```
    """

    def __init__(
        self,
        config: RetryConfig,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        self.config = config
        self._sleep = sleep

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        request_id: Optional[str] = None,
    ) -> T:
        """
        Run ``operation`` until it succeeds, fails permanently, or attempts
        run out.

        ``operation`` may be any callable returning an awaitable; each
        attempt awaits it inside the retry loop.
        """
        if not self.config.enabled:
            return await operation()

        async def attempt() -> T:
            return await operation()

        retrying = create_retrying(self.config, request_id, sleep=self._sleep)
        return await retrying(attempt)  # type: ignore[no-any-return]

    def wrap_operation(
        self,
        func: Callable[..., Awaitable[T]],
        request_id: Optional[str] = None,
    ) -> Callable[..., Awaitable[T]]:
        """Wrap an async callable so every call goes through ``execute``."""

        async def wrapped(*args: Any, **kwargs: Any) -> T:
            async def call() -> T:
                return await func(*args, **kwargs)

            return await self.execute(call, request_id)

        return wrapped
