from typing import Any

from .base import BaseResource


class PostureResource(BaseResource):
    """Posture analytics sessions, results and reports (``/posture-analytics``)."""

    async def create_session(self, session: dict[str, Any]) -> Any:
        return await self._http.post(
            "/posture-analytics/sessions", self._require(session, "session")
        )

    async def list_user_sessions(self, user_id: str) -> Any:
        path = self._path("/posture-analytics/sessions/users/{user_id}", user_id=user_id)
        return await self._http.get(path)

    async def delete_session(self, session_id: str) -> Any:
        path = self._path("/posture-analytics/sessions/{session_id}", session_id=session_id)
        return await self._http.delete(path)

    async def update_session_status(self, session_id: str, status: dict[str, Any]) -> Any:
        path = self._path(
            "/posture-analytics/sessions/{session_id}/status", session_id=session_id
        )
        return await self._http.patch(path, self._require(status, "status"))

    async def create_analytics(self, analytics: dict[str, Any]) -> Any:
        return await self._http.post(
            "/posture-analytics", self._require(analytics, "analytics")
        )

    async def get_analytics(self, analytics_id: str) -> Any:
        path = self._path("/posture-analytics/{analytics_id}", analytics_id=analytics_id)
        return await self._http.get(path)

    async def create_report(self, report: dict[str, Any]) -> Any:
        return await self._http.post(
            "/posture-analytics/report", self._require(report, "report")
        )

    async def get_user_report(self, user_id: str) -> Any:
        path = self._path("/posture-analytics/users/{user_id}/report", user_id=user_id)
        return await self._http.get(path)

    async def get_session_report(self, session_id: str) -> Any:
        path = self._path(
            "/posture-analytics/sessions/{session_id}/report", session_id=session_id
        )
        return await self._http.get(path)
