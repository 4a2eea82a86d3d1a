"""Users API.

Endpoints:
    GET    /users/profile/{id}
    PUT    /users/profile/{id}
    POST   /users/{id}/upload-verification - multipart `documentType` + `idCard`
    GET    /users/student/application-history
    GET    /users/verify-requests
    POST   /users/verify/{id}
    GET    /users/alumni | /users/students | /users/recruiters
    PATCH  /users/block/{id}
    DELETE /users/{id}
    GET    /users/search?q=&limit=
"""

from typing import Any

from campus_client.domain.protocols.auth_gateway_protocol import UploadFile
from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class UsersAPI(BaseResourceAPI):
    """User profiles, verification documents and directory listings."""

    async def get_profile(self, user_id: str) -> ApiResult:
        return await self._client.get(f"/users/profile/{user_id}")

    async def update_profile(self, user_id: str, data: dict[str, Any]) -> ApiResult:
        return await self._client.put(f"/users/profile/{user_id}", data)

    async def upload_verification_document(
        self, user_id: str, document_type: str, file: UploadFile
    ) -> ApiResult:
        """Upload an ID card for admin verification.

        Args:
            user_id: Account the document belongs to.
            document_type: Kind of document (sent as `documentType`).
            file: (filename, content, content_type) sent as `idCard`.
        """
        return await self._client.post(
            f"/users/{user_id}/upload-verification",
            form_data={"documentType": document_type},
            files={"idCard": file},
        )

    async def get_student_application_history(self) -> ApiResult:
        return await self._client.get("/users/student/application-history")

    async def get_verify_requests(self) -> ApiResult:
        return await self._client.get("/users/verify-requests")

    async def verify_user(self, user_id: str) -> ApiResult:
        return await self._client.post(f"/users/verify/{user_id}")

    async def get_alumni(self) -> ApiResult:
        return await self._client.get("/users/alumni")

    async def get_students(self) -> ApiResult:
        return await self._client.get("/users/students")

    async def get_recruiters(self) -> ApiResult:
        return await self._client.get("/users/recruiters")

    async def block_user(self, user_id: str, data: dict[str, Any]) -> ApiResult:
        return await self._client.patch(f"/users/block/{user_id}", data)

    async def delete_user(self, user_id: str) -> ApiResult:
        return await self._client.delete(f"/users/{user_id}")

    async def search(self, query: str, limit: int | None = None) -> ApiResult:
        return await self._client.get("/users/search", params={"q": query, "limit": limit})
