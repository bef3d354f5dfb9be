from typing import Optional

from ..models import (
    ApiResponse,
    CreateExerciseRequest,
    CreateProgramRequest,
    Exercise,
    PaginatedResponse,
    Program,
    ProgramCategory,
    ProgramDifficulty,
    UpdateProgramRequest,
)
from .base import BaseResource


class ProgramsResource(BaseResource):
    """Exercise programs and their exercises (``/programs``)."""

    async def list_programs(
        self,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
        category: Optional[ProgramCategory] = None,
        difficulty: Optional[ProgramDifficulty] = None,
        is_template: Optional[bool] = None,
        is_public: Optional[bool] = None,
        creator_id: Optional[str] = None,
    ) -> PaginatedResponse[Program]:
        params = self._page_params(
            page,
            limit,
            search=search,
            category=category,
            difficulty=difficulty,
            is_template=is_template,
            is_public=is_public,
            creator_id=creator_id,
        )
        payload = await self._http.get("/programs", params=params)
        return self._parse(PaginatedResponse[Program], payload)

    async def get_program(self, program_id: str) -> ApiResponse[Program]:
        path = self._path("/programs/{program_id}", program_id=program_id)
        return self._parse(ApiResponse[Program], await self._http.get(path))

    async def create_program(self, request: CreateProgramRequest) -> ApiResponse[Program]:
        payload = await self._http.post("/programs", self._require(request, "request"))
        return self._parse(ApiResponse[Program], payload)

    async def update_program(
        self, program_id: str, request: UpdateProgramRequest
    ) -> ApiResponse[Program]:
        path = self._path("/programs/{program_id}", program_id=program_id)
        payload = await self._http.put(path, self._require(request, "request"))
        return self._parse(ApiResponse[Program], payload)

    async def delete_program(self, program_id: str) -> None:
        await self._http.delete(self._path("/programs/{program_id}", program_id=program_id))

    async def list_exercises(
        self, program_id: str, page: int = 1, limit: int = 20
    ) -> PaginatedResponse[Exercise]:
        path = self._path("/programs/{program_id}/exercises", program_id=program_id)
        payload = await self._http.get(path, params=self._page_params(page, limit))
        return self._parse(PaginatedResponse[Exercise], payload)

    async def add_exercise(
        self, program_id: str, request: CreateExerciseRequest
    ) -> ApiResponse[Exercise]:
        path = self._path("/programs/{program_id}/exercises", program_id=program_id)
        payload = await self._http.post(path, self._require(request, "request"))
        return self._parse(ApiResponse[Exercise], payload)

    async def update_exercise(
        self, program_id: str, exercise_id: str, request: CreateExerciseRequest
    ) -> ApiResponse[Exercise]:
        path = self._path(
            "/programs/{program_id}/exercises/{exercise_id}",
            program_id=program_id,
            exercise_id=exercise_id,
        )
        payload = await self._http.put(path, self._require(request, "request"))
        return self._parse(ApiResponse[Exercise], payload)

    async def remove_exercise(self, program_id: str, exercise_id: str) -> None:
        path = self._path(
            "/programs/{program_id}/exercises/{exercise_id}",
            program_id=program_id,
            exercise_id=exercise_id,
        )
        await self._http.delete(path)

    async def duplicate_program(
        self, program_id: str, name: Optional[str] = None
    ) -> ApiResponse[Program]:
        path = self._path("/programs/{program_id}/duplicate", program_id=program_id)
        payload = await self._http.post(path, {"name": name} if name else None)
        return self._parse(ApiResponse[Program], payload)

    async def list_templates(
        self, page: int = 1, limit: int = 20, category: Optional[ProgramCategory] = None
    ) -> PaginatedResponse[Program]:
        params = self._page_params(page, limit, category=category)
        payload = await self._http.get("/programs/templates", params=params)
        return self._parse(PaginatedResponse[Program], payload)

    async def create_from_template(
        self, template_id: str, name: Optional[str] = None
    ) -> ApiResponse[Program]:
        path = self._path("/programs/from-template/{template_id}", template_id=template_id)
        payload = await self._http.post(path, {"name": name} if name else None)
        return self._parse(ApiResponse[Program], payload)
