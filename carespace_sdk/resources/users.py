from typing import Any, Optional

from ..models import (
    ApiResponse,
    CreateUserRequest,
    PaginatedResponse,
    UpdateUserRequest,
    User,
    UserRole,
    UserSettings,
)
from .base import BaseResource


class UsersResource(BaseResource):
    """User management endpoints (``/users``)."""

    async def list_users(
        self,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        is_active: Optional[bool] = None,
    ) -> PaginatedResponse[User]:
        params = self._page_params(page, limit, search=search, role=role, is_active=is_active)
        payload = await self._http.get("/users", params=params)
        return self._parse(PaginatedResponse[User], payload)

    async def get_user(self, user_id: str) -> ApiResponse[User]:
        payload = await self._http.get(self._path("/users/{user_id}", user_id=user_id))
        return self._parse(ApiResponse[User], payload)

    async def get_profile(self) -> ApiResponse[User]:
        """Profile of the authenticated user."""
        payload = await self._http.get("/users/profile")
        return self._parse(ApiResponse[User], payload)

    async def create_user(self, request: CreateUserRequest) -> ApiResponse[User]:
        payload = await self._http.post("/users", self._require(request, "request"))
        return self._parse(ApiResponse[User], payload)

    async def update_user(
        self, user_id: str, request: UpdateUserRequest
    ) -> ApiResponse[User]:
        path = self._path("/users/{user_id}", user_id=user_id)
        payload = await self._http.put(path, self._require(request, "request"))
        return self._parse(ApiResponse[User], payload)

    async def update_profile(self, request: UpdateUserRequest) -> ApiResponse[User]:
        payload = await self._http.put("/users/profile", self._require(request, "request"))
        return self._parse(ApiResponse[User], payload)

    async def delete_user(self, user_id: str) -> None:
        await self._http.delete(self._path("/users/{user_id}", user_id=user_id))

    async def activate_user(self, user_id: str) -> ApiResponse[Any]:
        path = self._path("/users/{user_id}/activate", user_id=user_id)
        return self._parse(ApiResponse[Any], await self._http.post(path))

    async def deactivate_user(self, user_id: str) -> ApiResponse[Any]:
        path = self._path("/users/{user_id}/deactivate", user_id=user_id)
        return self._parse(ApiResponse[Any], await self._http.post(path))

    async def get_settings(self, user_id: str) -> ApiResponse[UserSettings]:
        path = self._path("/users/{user_id}/settings", user_id=user_id)
        return self._parse(ApiResponse[UserSettings], await self._http.get(path))

    async def update_settings(
        self, user_id: str, settings: dict[str, Any]
    ) -> ApiResponse[UserSettings]:
        path = self._path("/users/{user_id}/settings", user_id=user_id)
        payload = await self._http.put(path, self._require(settings, "settings"))
        return self._parse(ApiResponse[UserSettings], payload)

    async def get_preferences(self, user_id: str) -> ApiResponse[dict[str, Any]]:
        path = self._path("/users/{user_id}/preferences", user_id=user_id)
        return self._parse(ApiResponse[dict[str, Any]], await self._http.get(path))

    async def update_preferences(
        self, user_id: str, preferences: dict[str, Any]
    ) -> ApiResponse[dict[str, Any]]:
        path = self._path("/users/{user_id}/preferences", user_id=user_id)
        payload = await self._http.put(path, self._require(preferences, "preferences"))
        return self._parse(ApiResponse[dict[str, Any]], payload)
