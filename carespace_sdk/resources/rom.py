from typing import Any

from .base import BaseResource


class RomResource(BaseResource):
    """Range of motion programs, sessions, results and templates (``/rom``)."""

    # Results

    async def get_patient_results(self, patient_id: str) -> Any:
        path = self._path("/rom/patients/{patient_id}/results", patient_id=patient_id)
        return await self._http.get(path)

    async def get_patient_results_by_session(self, patient_id: str) -> Any:
        path = self._path(
            "/rom/patients/{patient_id}/results/sessions", patient_id=patient_id
        )
        return await self._http.get(path)

    async def save_patient_results(self, results: dict[str, Any]) -> Any:
        return await self._http.post(
            "/rom/sessions/patient-results", self._require(results, "results")
        )

    async def update_patient_results(self, result_id: str, results: dict[str, Any]) -> Any:
        path = self._path("/rom/sessions/patient-results/{result_id}", result_id=result_id)
        return await self._http.patch(path, self._require(results, "results"))

    async def get_mobility_scores(self, user_id: str) -> Any:
        path = self._path("/rom/mobility-score/{user_id}", user_id=user_id)
        return await self._http.get(path)

    # Sessions

    async def list_user_sessions(self, user_id: str) -> Any:
        path = self._path("/rom/sessions/{user_id}/all", user_id=user_id)
        return await self._http.get(path)

    async def get_last_user_session(self, user_id: str) -> Any:
        path = self._path("/rom/sessions/{user_id}", user_id=user_id)
        return await self._http.get(path)

    async def list_sessions_by_status(self, status: str) -> Any:
        path = self._path("/rom/sessions/status/{status}/users", status=status)
        return await self._http.get(path)

    async def update_session_status(self, session_id: str, status: dict[str, Any]) -> Any:
        path = self._path("/rom/sessions/{session_id}/status", session_id=session_id)
        return await self._http.patch(path, self._require(status, "status"))

    async def get_session(self, session_id: str) -> Any:
        path = self._path("/rom/session/{session_id}", session_id=session_id)
        return await self._http.get(path)

    async def create_session(self, session: dict[str, Any]) -> Any:
        return await self._http.post("/rom/sessions", self._require(session, "session"))

    async def update_session(self, session_id: str, session: dict[str, Any]) -> Any:
        path = self._path("/rom/sessions/{session_id}", session_id=session_id)
        return await self._http.patch(path, self._require(session, "session"))

    async def complete_session(self, session_id: str, completion: dict[str, Any]) -> Any:
        path = self._path("/rom/sessions/{session_id}/complete", session_id=session_id)
        return await self._http.patch(path, self._require(completion, "completion"))

    async def list_sessions_by_program(self, program_id: str) -> Any:
        path = self._path("/rom/sessions/programs/{program_id}", program_id=program_id)
        return await self._http.get(path)

    async def generate_session_pdf(self, session_id: str, pdf: dict[str, Any]) -> Any:
        """Render a session report to PDF and store it server side."""
        path = self._path("/rom/sessions/{session_id}/pdf", session_id=session_id)
        return await self._http.post(path, self._require(pdf, "pdf"))

    # Library

    async def get_library(self) -> Any:
        return await self._http.get("/rom/library")

    async def create_library_entry(self, entry: dict[str, Any]) -> Any:
        return await self._http.post("/rom/library", self._require(entry, "entry"))

    async def get_library_entry(self, library_id: str) -> Any:
        path = self._path("/rom/library/{library_id}", library_id=library_id)
        return await self._http.get(path)

    async def update_library_entry(self, library_id: str, entry: dict[str, Any]) -> Any:
        path = self._path("/rom/library/{library_id}", library_id=library_id)
        return await self._http.patch(path, self._require(entry, "entry"))

    async def delete_library_entry(self, library_id: str) -> Any:
        path = self._path("/rom/library/{library_id}", library_id=library_id)
        return await self._http.delete(path)

    # Programs

    async def list_programs(self) -> Any:
        """ROM programs owned by the authenticated user."""
        return await self._http.get("/rom/programs")

    async def create_program(self, program: dict[str, Any]) -> Any:
        return await self._http.post("/rom/programs", self._require(program, "program"))

    async def list_patient_programs(self, patient_id: str) -> Any:
        path = self._path("/rom/programs/patients/{patient_id}", patient_id=patient_id)
        return await self._http.get(path)

    async def get_program(self, program_id: str) -> Any:
        path = self._path("/rom/programs/{program_id}", program_id=program_id)
        return await self._http.get(path)

    async def update_program(self, program_id: str, program: dict[str, Any]) -> Any:
        path = self._path("/rom/programs/{program_id}", program_id=program_id)
        return await self._http.patch(path, self._require(program, "program"))

    async def delete_program(self, program_id: str) -> Any:
        path = self._path("/rom/programs/{program_id}", program_id=program_id)
        return await self._http.delete(path)

    # Program templates

    async def list_templates(self) -> Any:
        return await self._http.get("/rom/program-templates")

    async def create_template(self, template: dict[str, Any]) -> Any:
        return await self._http.post(
            "/rom/program-templates", self._require(template, "template")
        )

    async def get_template(self, template_id: str) -> Any:
        path = self._path("/rom/program-templates/{template_id}", template_id=template_id)
        return await self._http.get(path)

    async def update_template(self, template_id: str, template: dict[str, Any]) -> Any:
        path = self._path("/rom/program-templates/{template_id}", template_id=template_id)
        return await self._http.patch(path, self._require(template, "template"))

    async def delete_template(self, template_id: str) -> Any:
        path = self._path("/rom/program-templates/{template_id}", template_id=template_id)
        return await self._http.delete(path)
