"""
High-level Carespace client.

``CarespaceClient`` owns one ``CarespaceHttpClient`` and exposes every API
group as an attribute, plus a few convenience helpers for the most common
calls.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, Optional

import httpx

from .config import ClientConfig
from .exceptions import AuthenticationError, CarespaceError
from .http import CarespaceHttpClient
from .models import (
    Client,
    LoginResponse,
    PaginatedResponse,
    Program,
    ProgramCategory,
    User,
)
from .resources import (
    ActivityStreamResource,
    AuthResource,
    ClientsResource,
    EvaluationsResource,
    PlansResource,
    PostureResource,
    ProgramsResource,
    ReportsResource,
    RomResource,
    SettingsResource,
    StatsResource,
    SurveysResource,
    UsersResource,
    VRResource,
)


class CarespaceClient:
    """
    Entry point of the SDK.

    Usage:
        async with CarespaceClient.for_production(api_key) as client:
            users = await client.users.list_users(limit=10)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        config = config or ClientConfig.for_development()
        if base_url is not None:
            config = ClientConfig.model_validate({**config.model_dump(), "base_url": base_url})
        if api_key is not None:
            config = config.with_api_key(api_key)
        self.config = config
        self.logger = logging.getLogger(config.logging.logger_name)

        self._http = CarespaceHttpClient(config, transport=transport)

        self.auth = AuthResource(self._http)
        self.users = UsersResource(self._http)
        self.clients = ClientsResource(self._http)
        self.programs = ProgramsResource(self._http)
        self.rom = RomResource(self._http)
        self.surveys = SurveysResource(self._http)
        self.posture = PostureResource(self._http)
        self.reports = ReportsResource(self._http)
        self.settings = SettingsResource(self._http)
        self.evaluations = EvaluationsResource(self._http)
        self.activity_stream = ActivityStreamResource(self._http)
        self.plans = PlansResource(self._http)
        self.stats = StatsResource(self._http)
        self.vr = VRResource(self._http)

    async def __aenter__(self) -> "CarespaceClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def http(self) -> CarespaceHttpClient:
        return self._http

    @property
    def api_key(self) -> Optional[str]:
        return self._http.api_key

    async def close(self) -> None:
        await self._http.close()

    def set_api_key(self, api_key: Optional[str]) -> None:
        self._http.set_api_key(api_key)

    def set_default_header(self, name: str, value: str) -> None:
        self._http.set_default_header(name, value)

    def remove_default_header(self, name: str) -> None:
        self._http.remove_default_header(name)

    async def login_and_set_token(self, email: str, password: str) -> LoginResponse:
        """
        Log in and use the returned access token for all later requests.

        Raises:
            AuthenticationError: If the login envelope reports failure
        """
        response = await self.auth.login(email, password)
        if not response.success or response.data is None:
            raise AuthenticationError(response.message or response.error or "Login failed")
        self.set_api_key(response.data.access_token)
        self.logger.info("Access token updated after login")
        return response.data

    async def quick_get_users(
        self, limit: int = 20, search: Optional[str] = None
    ) -> PaginatedResponse[User]:
        return await self.users.list_users(limit=limit, search=search)

    async def quick_get_clients(
        self, limit: int = 20, search: Optional[str] = None
    ) -> PaginatedResponse[Client]:
        return await self.clients.list_clients(limit=limit, search=search)

    async def quick_get_programs(
        self, limit: int = 20, category: Optional[ProgramCategory] = None
    ) -> PaginatedResponse[Program]:
        return await self.programs.list_programs(limit=limit, category=category)

    async def health_check(self) -> bool:
        """Return True if the API answers an authenticated or anonymous probe."""
        try:
            if self.api_key:
                await self._http.get("/users/profile")
            else:
                await self._http.get("/users", params={"limit": 1})
        except CarespaceError as e:
            self.logger.warning(f"Health check failed: {type(e).__name__}: {e}")
            return False
        return True

    @classmethod
    def for_development(
        cls,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "CarespaceClient":
        return cls(ClientConfig.for_development(api_key), transport=transport)

    @classmethod
    def for_staging(
        cls, api_key: str, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "CarespaceClient":
        return cls(ClientConfig.for_staging(api_key), transport=transport)

    @classmethod
    def for_production(
        cls, api_key: str, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "CarespaceClient":
        return cls(ClientConfig.for_production(api_key), transport=transport)

    @classmethod
    def from_env(
        cls, transport: Optional[httpx.AsyncBaseTransport] = None, **overrides: Any
    ) -> "CarespaceClient":
        """Build a client from ``CARESPACE_*`` environment variables."""
        return cls(ClientConfig.from_env(**overrides), transport=transport)


@asynccontextmanager
async def create_carespace_client(
    config: Optional[ClientConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncGenerator[CarespaceClient, None]:
    """
    Factory function to create a CarespaceClient with proper lifecycle management.

    Usage:
        async with create_carespace_client(config) as client:
            profile = await client.users.get_profile()
    """
    client = CarespaceClient(config, transport=transport)
    try:
        await client.__aenter__()
        yield client
    finally:
        await client.close()
