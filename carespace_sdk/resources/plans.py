from typing import Any

from .base import BaseResource


class PlansResource(BaseResource):
    """Subscription plans per user (``/plans``)."""

    async def list_user_plans(self) -> Any:
        return await self._http.get("/plans/users")

    async def get_user_plan(self, user_id: str) -> Any:
        return await self._http.get(self._path("/plans/users/{user_id}", user_id=user_id))

    async def create_user_plan(self, user_id: str, plan: dict[str, Any]) -> Any:
        path = self._path("/plans/users/{user_id}", user_id=user_id)
        return await self._http.post(path, self._require(plan, "plan"))

    async def update_user_plan(self, user_id: str, plan: dict[str, Any]) -> Any:
        path = self._path("/plans/users/{user_id}", user_id=user_id)
        return await self._http.patch(path, self._require(plan, "plan"))
