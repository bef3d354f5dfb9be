from typing import Any

from .base import BaseResource


class ActivityStreamResource(BaseResource):
    """Activity feed: history, evaluations, feedback and posts (``/activity-stream``)."""

    async def get_unread_history(self) -> Any:
        return await self._http.get("/activity-stream/history/unread")

    async def list_history(self, user_id: str) -> Any:
        path = self._path("/activity-stream/history/{user_id}", user_id=user_id)
        return await self._http.get(path)

    async def mark_history_read(self, user_id: str, read: dict[str, Any]) -> Any:
        path = self._path("/activity-stream/history/read/{user_id}", user_id=user_id)
        return await self._http.patch(path, self._require(read, "read"))

    async def get_activity(self, activity_id: str) -> Any:
        path = self._path("/activity-stream/{activity_id}", activity_id=activity_id)
        return await self._http.get(path)

    async def create_evaluation(self, evaluation: dict[str, Any]) -> Any:
        return await self._http.post(
            "/activity-stream/evaluation", self._require(evaluation, "evaluation")
        )

    async def get_evaluation(self, evaluation_id: str) -> Any:
        path = self._path(
            "/activity-stream/evaluation/{evaluation_id}", evaluation_id=evaluation_id
        )
        return await self._http.get(path)

    async def create_feedback(self, feedback: dict[str, Any]) -> Any:
        return await self._http.post(
            "/activity-stream/feedback", self._require(feedback, "feedback")
        )

    async def get_feedback(self, feedback_id: str) -> Any:
        path = self._path("/activity-stream/feedback/{feedback_id}", feedback_id=feedback_id)
        return await self._http.get(path)

    async def create_post(self, post: dict[str, Any]) -> Any:
        return await self._http.post("/activity-stream/post", self._require(post, "post"))

    async def get_post(self, post_id: str) -> Any:
        path = self._path("/activity-stream/post/{post_id}", post_id=post_id)
        return await self._http.get(path)
