"""Shared fixtures: a recording mock transport and a client wired to it."""

import json
from typing import Any, Callable, Optional, Union

import httpx
import pytest

from carespace_sdk.config import ClientConfig, RetryConfig
from carespace_sdk.http import CarespaceHttpClient

BASE_URL = "https://api.test.carespace.ai"

Reply = Union[Callable[[httpx.Request], httpx.Response], Exception]


class Recorder:
    """
    Handler for ``httpx.MockTransport``.

    Records every request and answers from a queue of replies. Once the
    queue runs dry the most recently used reply is repeated.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: list[Reply] = []
        self._current: Optional[Reply] = None

    def reply(self, reply: Reply) -> "Recorder":
        self._replies.append(reply)
        return self

    def json(
        self,
        payload: Any,
        status_code: int = 200,
        headers: Optional[dict[str, str]] = None,
    ) -> "Recorder":
        return self.reply(
            lambda request: httpx.Response(status_code, json=payload, headers=headers)
        )

    def status(self, status_code: int, **kwargs: Any) -> "Recorder":
        return self.reply(lambda request: httpx.Response(status_code, **kwargs))

    def fail(self, exc: Exception) -> "Recorder":
        return self.reply(exc)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._replies:
            self._current = self._replies.pop(0)
        reply = self._current
        if reply is None:
            return httpx.Response(200, json={"success": True})
        if isinstance(reply, Exception):
            raise reply
        return reply(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def config():
    """Client configuration with instant retries."""
    return ClientConfig(
        base_url=BASE_URL,
        api_key="test-key",
        retry=RetryConfig(max_retries=2, base_delay_seconds=0, max_delay_seconds=0),
    )


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
async def http(config, recorder):
    client = CarespaceHttpClient(config, transport=httpx.MockTransport(recorder))
    yield client
    await client.close()
