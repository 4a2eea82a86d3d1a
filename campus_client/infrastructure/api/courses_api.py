"""Courses API.

Endpoints:
    GET    /courses?{filters}
    GET    /courses/{id}
    POST   /courses/enroll - students only
    POST   /courses - recruiters only
    DELETE /courses/{id} - admins only
    GET    /courses/{courseId}/progress
    POST   /courses/complete-checkpoint
"""

from typing import Any

from campus_client.core.result import Failure, Result, Success
from campus_client.domain.errors import ApiError
from campus_client.domain.value_objects import CourseProgress
from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class CoursesAPI(BaseResourceAPI):
    """Course catalogue, enrollment and checkpoint progress."""

    async def list(self, params: dict[str, Any] | None = None) -> ApiResult:
        return await self._client.get("/courses", params=params)

    async def get(self, course_id: str) -> ApiResult:
        return await self._client.get(f"/courses/{course_id}")

    async def enroll(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/courses/enroll", data)

    async def create(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/courses", data)

    async def delete(self, course_id: str) -> ApiResult:
        return await self._client.delete(f"/courses/{course_id}")

    async def get_progress(self, course_id: str) -> ApiResult:
        return await self._client.get(f"/courses/{course_id}/progress")

    async def complete_checkpoint(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/courses/complete-checkpoint", data)

    async def get_course_progress(
        self, course_id: str
    ) -> Result[CourseProgress, ApiError]:
        """Fetch progress and wrap it as a CourseProgress.

        Reads `data.progress` when present, else `data` itself; a body
        without either counts as no progress yet.
        """
        result = await self.get_progress(course_id)
        if isinstance(result, Failure):
            return result

        data = result.value.get("data")
        if isinstance(data, dict) and isinstance(data.get("progress"), dict):
            data = data["progress"]
        return Success(value=CourseProgress.from_api(data if isinstance(data, dict) else None))
