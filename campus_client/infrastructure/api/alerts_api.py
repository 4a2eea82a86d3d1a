"""Alerts API.

Endpoints:
    POST  /alerts/create
    GET   /alerts
    PATCH /alerts/{id}/mark-seen
"""

from typing import Any

from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class AlertsAPI(BaseResourceAPI):
    async def create(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/alerts/create", data)

    async def list(self) -> ApiResult:
        return await self._client.get("/alerts")

    async def mark_seen(self, alert_id: str) -> ApiResult:
        return await self._client.patch(f"/alerts/{alert_id}/mark-seen")
