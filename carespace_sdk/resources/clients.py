from typing import Any, Optional

from ..models import (
    ApiResponse,
    Client,
    ClientStats,
    CreateClientRequest,
    PaginatedResponse,
    Program,
    UpdateClientRequest,
)
from .base import BaseResource


class ClientsResource(BaseResource):
    """Client (patient) management endpoints (``/clients``)."""

    async def list_clients(
        self,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
        provider_id: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> PaginatedResponse[Client]:
        params = self._page_params(
            page, limit, search=search, provider_id=provider_id, is_active=is_active
        )
        payload = await self._http.get("/clients", params=params)
        return self._parse(PaginatedResponse[Client], payload)

    async def get_client(self, client_id: str) -> ApiResponse[Client]:
        path = self._path("/clients/{client_id}", client_id=client_id)
        return self._parse(ApiResponse[Client], await self._http.get(path))

    async def get_client_by_invite_code(self, invite_code: str) -> ApiResponse[Client]:
        path = self._path("/clients/invite-code/{invite_code}", invite_code=invite_code)
        return self._parse(ApiResponse[Client], await self._http.get(path))

    async def create_client(self, request: CreateClientRequest) -> ApiResponse[Client]:
        payload = await self._http.post("/clients", self._require(request, "request"))
        return self._parse(ApiResponse[Client], payload)

    async def update_client(
        self, client_id: str, request: UpdateClientRequest
    ) -> ApiResponse[Client]:
        path = self._path("/clients/{client_id}", client_id=client_id)
        payload = await self._http.put(path, self._require(request, "request"))
        return self._parse(ApiResponse[Client], payload)

    async def delete_client(self, client_id: str) -> None:
        await self._http.delete(self._path("/clients/{client_id}", client_id=client_id))

    async def get_client_stats(self, client_id: str) -> ApiResponse[ClientStats]:
        path = self._path("/clients/{client_id}/stats", client_id=client_id)
        return self._parse(ApiResponse[ClientStats], await self._http.get(path))

    async def list_client_programs(
        self, client_id: str, page: int = 1, limit: int = 20
    ) -> PaginatedResponse[Program]:
        path = self._path("/clients/{client_id}/programs", client_id=client_id)
        payload = await self._http.get(path, params=self._page_params(page, limit))
        return self._parse(PaginatedResponse[Program], payload)

    async def assign_program(self, client_id: str, program_id: str) -> ApiResponse[Any]:
        path = self._path("/clients/{client_id}/programs", client_id=client_id)
        if not program_id or not program_id.strip():
            raise ValueError("Program id is required")
        payload = await self._http.post(path, {"program_id": program_id})
        return self._parse(ApiResponse[Any], payload)

    async def unassign_program(self, client_id: str, program_id: str) -> ApiResponse[Any]:
        path = self._path(
            "/clients/{client_id}/programs/{program_id}",
            client_id=client_id,
            program_id=program_id,
        )
        return self._parse(ApiResponse[Any], await self._http.delete(path))

    async def activate_client(self, client_id: str) -> ApiResponse[Any]:
        path = self._path("/clients/{client_id}/activate", client_id=client_id)
        return self._parse(ApiResponse[Any], await self._http.post(path))

    async def deactivate_client(self, client_id: str) -> ApiResponse[Any]:
        path = self._path("/clients/{client_id}/deactivate", client_id=client_id)
        return self._parse(ApiResponse[Any], await self._http.post(path))

    async def list_client_evaluations(self, client_id: str, **params: Any) -> Any:
        path = self._path("/clients/{client_id}/evaluations", client_id=client_id)
        return await self._http.get(path, params=params)

    async def list_client_reports(self, client_id: str, **params: Any) -> Any:
        path = self._path("/clients/{client_id}/reports", client_id=client_id)
        return await self._http.get(path, params=params)
