"""Job FAQ API.

Endpoints:
    POST   /job-faq
    GET    /job-faq?{filters}
    GET    /job-faq/{id}
    PUT    /job-faq/{id}
    DELETE /job-faq/{id}
    POST   /job-faq/{id}/helpful
    GET    /job-faq/categories
    GET    /job-faq/recruiter/my-faqs
"""

from typing import Any

from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class JobFAQAPI(BaseResourceAPI):
    async def create(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/job-faq", data)

    async def get_all(self, params: dict[str, Any] | None = None) -> ApiResult:
        return await self._client.get("/job-faq", params=params)

    async def get_by_id(self, faq_id: str) -> ApiResult:
        return await self._client.get(f"/job-faq/{faq_id}")

    async def update(self, faq_id: str, data: dict[str, Any]) -> ApiResult:
        return await self._client.put(f"/job-faq/{faq_id}", data)

    async def delete(self, faq_id: str) -> ApiResult:
        return await self._client.delete(f"/job-faq/{faq_id}")

    async def mark_helpful(
        self, faq_id: str, data: dict[str, Any] | None = None
    ) -> ApiResult:
        return await self._client.post(f"/job-faq/{faq_id}/helpful", data)

    async def get_categories(self) -> ApiResult:
        return await self._client.get("/job-faq/categories")

    async def get_recruiter_faqs(self) -> ApiResult:
        return await self._client.get("/job-faq/recruiter/my-faqs")
