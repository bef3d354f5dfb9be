from typing import Any

from .base import BaseResource


class StatsResource(BaseResource):
    async def get_client_stats(self) -> Any:
        """Aggregate statistics for the authenticated organisation."""
        return await self._http.get("/stats")
