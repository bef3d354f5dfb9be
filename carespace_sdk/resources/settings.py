from typing import Any

from .base import BaseResource


class SettingsResource(BaseResource):
    """
    Organisation settings (``/settings``).

    Each named section is read with ``GET`` and created or replaced with
    ``POST`` on the same path.
    """

    async def list_settings(self) -> Any:
        return await self._http.get("/settings")

    async def create_settings(self, settings: dict[str, Any]) -> Any:
        return await self._http.post("/settings", self._require(settings, "settings"))

    async def update_settings(self, settings_id: str, settings: dict[str, Any]) -> Any:
        path = self._path("/settings/{settings_id}", settings_id=settings_id)
        return await self._http.patch(path, self._require(settings, "settings"))

    async def _get_section(self, section: str) -> Any:
        return await self._http.get(f"/settings/{section}")

    async def _save_section(self, section: str, data: dict[str, Any]) -> Any:
        return await self._http.post(f"/settings/{section}", self._require(data, section))

    async def get_email_template(self) -> Any:
        return await self._get_section("templates/email")

    async def save_email_template(self, template: dict[str, Any]) -> Any:
        return await self._save_section("templates/email", template)

    async def get_invite_template(self) -> Any:
        return await self._get_section("templates/invite")

    async def save_invite_template(self, template: dict[str, Any]) -> Any:
        return await self._save_section("templates/invite", template)

    async def get_rom_email_template(self) -> Any:
        return await self._get_section("templates/email/rom")

    async def save_rom_email_template(self, template: dict[str, Any]) -> Any:
        return await self._save_section("templates/email/rom", template)

    async def get_theme(self) -> Any:
        return await self._get_section("themes")

    async def save_theme(self, theme: dict[str, Any]) -> Any:
        return await self._save_section("themes", theme)

    async def get_network(self) -> Any:
        return await self._get_section("network")

    async def save_network(self, network: dict[str, Any]) -> Any:
        return await self._save_section("network", network)

    async def get_premium_plans_status(self) -> Any:
        return await self._get_section("premium-plans/status")

    async def save_premium_plans_status(self, status: dict[str, Any]) -> Any:
        return await self._save_section("premium-plans/status", status)

    async def get_plans(self) -> Any:
        return await self._get_section("plans")

    async def save_plans(self, plans: dict[str, Any]) -> Any:
        return await self._save_section("plans", plans)

    async def get_functional_goals(self) -> Any:
        return await self._get_section("functional-goals")

    async def save_functional_goals(self, goals: dict[str, Any]) -> Any:
        return await self._save_section("functional-goals", goals)

    async def get_pre_existing_conditions(self) -> Any:
        return await self._get_section("pre-existing-conditions")

    async def save_pre_existing_conditions(self, conditions: dict[str, Any]) -> Any:
        return await self._save_section("pre-existing-conditions", conditions)
