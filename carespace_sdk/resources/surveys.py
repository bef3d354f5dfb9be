from typing import Any

from .base import BaseResource


class SurveysResource(BaseResource):
    """Surveys, survey sessions and survey templates (``/survey``)."""

    async def create_survey(self, survey: dict[str, Any]) -> Any:
        return await self._http.post("/survey", self._require(survey, "survey"))

    async def list_user_surveys(self, user_id: str) -> Any:
        return await self._http.get(self._path("/survey/{user_id}", user_id=user_id))

    async def get_survey(self, survey_id: str) -> Any:
        return await self._http.get(self._path("/survey/get/{survey_id}", survey_id=survey_id))

    async def update_survey(self, survey_id: str, survey: dict[str, Any]) -> Any:
        path = self._path("/survey/{survey_id}", survey_id=survey_id)
        return await self._http.patch(path, self._require(survey, "survey"))

    async def delete_survey(self, survey_id: str) -> Any:
        return await self._http.delete(self._path("/survey/{survey_id}", survey_id=survey_id))

    async def save_result(self, survey_id: str, result: dict[str, Any]) -> Any:
        path = self._path("/survey/session/{survey_id}", survey_id=survey_id)
        return await self._http.post(path, self._require(result, "result"))

    async def list_user_results(self, user_id: str) -> Any:
        return await self._http.get(self._path("/survey/session/{user_id}", user_id=user_id))

    async def get_result(self, result_id: str) -> Any:
        return await self._http.get(self._path("/survey/result/{result_id}", result_id=result_id))

    async def list_survey_results(self, survey_id: str) -> Any:
        return await self._http.get(self._path("/survey/sessions/{survey_id}", survey_id=survey_id))

    async def list_sessions_by_status(self, status: str) -> Any:
        path = self._path("/survey/sessions/status/{status}/users", status=status)
        return await self._http.get(path)

    async def update_session_status(self, session_id: str, status: dict[str, Any]) -> Any:
        path = self._path("/survey/sessions/{session_id}/status", session_id=session_id)
        return await self._http.patch(path, self._require(status, "status"))

    async def create_template(self, template: dict[str, Any]) -> Any:
        return await self._http.post("/survey/template", self._require(template, "template"))

    async def list_templates(self) -> Any:
        return await self._http.get("/survey/template/list")

    async def update_template(self, template_id: str, template: dict[str, Any]) -> Any:
        path = self._path("/survey/template/{template_id}", template_id=template_id)
        return await self._http.patch(path, self._require(template, "template"))
