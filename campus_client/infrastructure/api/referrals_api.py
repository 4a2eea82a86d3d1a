"""Referrals API.

Endpoints:
    POST   /referrals/request
    GET    /referrals/my-requests
    GET    /referrals/alumni
    GET    /referrals/alumni/pending
    PATCH  /referrals/{id}/approve | /referrals/{id}/reject
    GET    /referrals/{id}
    GET    /referrals/job/{jobId}
    PATCH  /referrals/{id}/mark-read
    DELETE /referrals/{id}
"""

from typing import Any

from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class ReferralsAPI(BaseResourceAPI):
    """Referral requests between students and alumni."""

    async def request_referral(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/referrals/request", data)

    async def get_my_requests(self) -> ApiResult:
        return await self._client.get("/referrals/my-requests")

    async def get_alumni_referrals(self) -> ApiResult:
        return await self._client.get("/referrals/alumni")

    async def get_pending_referrals(self) -> ApiResult:
        return await self._client.get("/referrals/alumni/pending")

    async def approve_referral(
        self, referral_id: str, data: dict[str, Any] | None = None
    ) -> ApiResult:
        return await self._client.patch(f"/referrals/{referral_id}/approve", data)

    async def reject_referral(
        self, referral_id: str, data: dict[str, Any] | None = None
    ) -> ApiResult:
        return await self._client.patch(f"/referrals/{referral_id}/reject", data)

    async def get_referral(self, referral_id: str) -> ApiResult:
        return await self._client.get(f"/referrals/{referral_id}")

    async def get_job_referrals(self, job_id: str) -> ApiResult:
        return await self._client.get(f"/referrals/job/{job_id}")

    async def mark_as_read(self, referral_id: str) -> ApiResult:
        return await self._client.patch(f"/referrals/{referral_id}/mark-read")

    async def delete_referral(self, referral_id: str) -> ApiResult:
        return await self._client.delete(f"/referrals/{referral_id}")
