"""Connections API.

Endpoints:
    POST  /connections/request
    PATCH /connections/{id}/approve
    GET   /connections
    GET   /connections/incoming
    GET   /connections/outgoing
    GET   /connections/status?targetId=
"""

from typing import Any

from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class ConnectionsAPI(BaseResourceAPI):
    async def request(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/connections/request", data)

    async def approve(self, connection_id: str) -> ApiResult:
        return await self._client.patch(f"/connections/{connection_id}/approve")

    async def list(self) -> ApiResult:
        return await self._client.get("/connections")

    async def incoming(self) -> ApiResult:
        return await self._client.get("/connections/incoming")

    async def outgoing(self) -> ApiResult:
        return await self._client.get("/connections/outgoing")

    async def status(self, target_id: str) -> ApiResult:
        return await self._client.get("/connections/status", params={"targetId": target_id})
