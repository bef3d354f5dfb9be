from typing import Any

from .base import BaseResource


class ReportsResource(BaseResource):
    """Reports and report exports (``/reports``)."""

    async def create_report(self, report: dict[str, Any]) -> Any:
        return await self._http.post("/reports", self._require(report, "report"))

    async def create_report_by_feature_and_date(self, report: dict[str, Any]) -> Any:
        return await self._http.post("/reports/create", self._require(report, "report"))

    async def list_user_reports(self, user_id: str) -> Any:
        return await self._http.get(self._path("/reports/users/{user_id}", user_id=user_id))

    async def get_report(self, report_id: str) -> Any:
        return await self._http.get(self._path("/reports/{report_id}", report_id=report_id))

    async def update_report(self, report_id: str, report: dict[str, Any]) -> Any:
        path = self._path("/reports/{report_id}", report_id=report_id)
        return await self._http.patch(path, self._require(report, "report"))

    async def delete_report(self, report_id: str) -> Any:
        return await self._http.delete(self._path("/reports/{report_id}", report_id=report_id))

    async def update_report_notes(self, report_id: str, notes: dict[str, Any]) -> Any:
        path = self._path("/reports/notes/{report_id}", report_id=report_id)
        return await self._http.patch(path, self._require(notes, "notes"))

    async def export_omnirom_csv(self) -> str:
        return await self._http.get("/reports/omnirom/csv", headers={"Accept": "text/csv"})

    async def export_letsmove_csv(self) -> str:
        return await self._http.get("/reports/letsmove/csv", headers={"Accept": "text/csv"})

    async def export_aggregate_excel(self) -> bytes:
        """Raw workbook bytes of the aggregate report."""
        response = await self._http.send("GET", "/reports/aggregate/excel")
        return response.content
