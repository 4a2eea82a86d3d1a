"""Messages API.

Endpoints:
    POST /messages/send
    GET  /messages/inbox
    GET  /messages/conversation/{userId}
"""

from typing import Any

from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class MessagesAPI(BaseResourceAPI):
    async def send(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/messages/send", data)

    async def inbox(self) -> ApiResult:
        return await self._client.get("/messages/inbox")

    async def conversation(self, user_id: str) -> ApiResult:
        return await self._client.get(f"/messages/conversation/{user_id}")
