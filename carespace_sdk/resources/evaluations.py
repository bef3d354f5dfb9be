from typing import Any

from .base import BaseResource


class EvaluationsResource(BaseResource):
    """Evaluation sessions (``/evaluation``)."""

    async def create_session(self, evaluation: dict[str, Any]) -> Any:
        return await self._http.post("/evaluation", self._require(evaluation, "evaluation"))

    async def update_session(self, session_id: str, session: dict[str, Any]) -> Any:
        path = self._path("/evaluation/{session_id}", session_id=session_id)
        return await self._http.patch(path, self._require(session, "session"))

    async def list_user_sessions(self, user_id: str) -> Any:
        return await self._http.get(self._path("/evaluation/{user_id}", user_id=user_id))

    async def get_session(self, evaluation_id: str) -> Any:
        path = self._path("/evaluation/sessions/{evaluation_id}", evaluation_id=evaluation_id)
        return await self._http.get(path)

    async def list_sessions_by_status(self, status: str) -> Any:
        path = self._path("/evaluation/sessions/status/{status}/users", status=status)
        return await self._http.get(path)

    async def update_session_status(self, session_id: str, status: dict[str, Any]) -> Any:
        path = self._path("/evaluation/sessions/{session_id}/status", session_id=session_id)
        return await self._http.patch(path, self._require(status, "status"))
