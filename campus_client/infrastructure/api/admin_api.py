"""Admin API.

Endpoints:
    GET    /admin/dashboard
    GET    /admin/users?{filters}
    GET    /admin/spam-monitor?{filters}
    PATCH  /admin/block-user/{id}
    PATCH  /admin/update-spam-score/{id}
    GET    /admin/jobs?{filters}
    PATCH  /admin/toggle-job/{id}
    GET    /admin/referrals?{filters}
    DELETE /admin/delete-job/{id}
    DELETE /admin/delete-referral/{id}
    GET    /admin/{alumni,student,recruiter}-verifications?{filters}
    PATCH  /admin/verify-{alumni,student,recruiter}/{id}
"""

from typing import Any

from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI

type Params = dict[str, Any] | None


class AdminAPI(BaseResourceAPI):
    """Moderation and account verification."""

    async def get_dashboard(self) -> ApiResult:
        return await self._client.get("/admin/dashboard")

    async def get_users(self, params: Params = None) -> ApiResult:
        return await self._client.get("/admin/users", params=params)

    async def get_spam_monitor(self, params: Params = None) -> ApiResult:
        return await self._client.get("/admin/spam-monitor", params=params)

    async def block_user(self, user_id: str, data: dict[str, Any]) -> ApiResult:
        return await self._client.patch(f"/admin/block-user/{user_id}", data)

    async def update_spam_score(self, user_id: str, data: dict[str, Any]) -> ApiResult:
        return await self._client.patch(f"/admin/update-spam-score/{user_id}", data)

    async def get_all_jobs(self, params: Params = None) -> ApiResult:
        return await self._client.get("/admin/jobs", params=params)

    async def toggle_job(self, job_id: str) -> ApiResult:
        return await self._client.patch(f"/admin/toggle-job/{job_id}")

    async def get_all_referrals(self, params: Params = None) -> ApiResult:
        return await self._client.get("/admin/referrals", params=params)

    async def delete_job(self, job_id: str) -> ApiResult:
        return await self._client.delete(f"/admin/delete-job/{job_id}")

    async def delete_referral(self, referral_id: str) -> ApiResult:
        return await self._client.delete(f"/admin/delete-referral/{referral_id}")

    async def get_pending_alumni_verifications(self, params: Params = None) -> ApiResult:
        return await self._client.get("/admin/alumni-verifications", params=params)

    async def verify_alumni_account(
        self, alumni_id: str, data: dict[str, Any]
    ) -> ApiResult:
        return await self._client.patch(f"/admin/verify-alumni/{alumni_id}", data)

    async def get_pending_student_verifications(
        self, params: Params = None
    ) -> ApiResult:
        return await self._client.get("/admin/student-verifications", params=params)

    async def verify_student_account(
        self, student_id: str, data: dict[str, Any]
    ) -> ApiResult:
        return await self._client.patch(f"/admin/verify-student/{student_id}", data)

    async def get_pending_recruiter_verifications(
        self, params: Params = None
    ) -> ApiResult:
        return await self._client.get("/admin/recruiter-verifications", params=params)

    async def verify_recruiter_account(
        self, recruiter_id: str, data: dict[str, Any]
    ) -> ApiResult:
        return await self._client.patch(f"/admin/verify-recruiter/{recruiter_id}", data)
