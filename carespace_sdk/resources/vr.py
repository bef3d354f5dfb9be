from typing import Any

from .base import BaseResource


class VRResource(BaseResource):
    """Pairing codes for VR headsets (``/vr``)."""

    async def generate_code(self, user_id: str) -> Any:
        path = self._path("/vr/generate-code/{user_id}", user_id=user_id)
        return await self._http.post(path)

    async def validate_code(self, code: dict[str, Any]) -> Any:
        return await self._http.post("/vr/validate-code", self._require(code, "code"))
