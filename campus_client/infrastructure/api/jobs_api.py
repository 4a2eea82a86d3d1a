"""Jobs API.

Endpoints:
    GET    /jobs?{filters}
    GET    /jobs/{id}
    POST   /jobs
    PUT    /jobs/{id}
    DELETE /jobs/{id}
    POST   /jobs/{id}/apply
    GET    /jobs/my-postings
    GET    /jobs/my-applications
    GET    /jobs/{jobId}/my-application
    PATCH  /jobs/{jobId}/applicant-status/{applicantId}
    GET    /jobs/recruiter/summary
"""

from typing import Any

from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class JobsAPI(BaseResourceAPI):
    """Job postings and applications."""

    async def get_jobs(self, params: dict[str, Any] | None = None) -> ApiResult:
        """List jobs; empty filter values are not sent."""
        return await self._client.get("/jobs", params=params)

    async def get_job(self, job_id: str) -> ApiResult:
        return await self._client.get(f"/jobs/{job_id}")

    async def create_job(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/jobs", data)

    async def update_job(self, job_id: str, data: dict[str, Any]) -> ApiResult:
        return await self._client.put(f"/jobs/{job_id}", data)

    async def delete_job(self, job_id: str) -> ApiResult:
        return await self._client.delete(f"/jobs/{job_id}")

    async def apply_for_job(
        self, job_id: str, data: dict[str, Any] | None = None
    ) -> ApiResult:
        return await self._client.post(f"/jobs/{job_id}/apply", data)

    async def get_my_postings(self) -> ApiResult:
        return await self._client.get("/jobs/my-postings")

    async def get_my_applications(self) -> ApiResult:
        return await self._client.get("/jobs/my-applications")

    async def get_my_application_status(self, job_id: str) -> ApiResult:
        return await self._client.get(f"/jobs/{job_id}/my-application")

    async def update_applicant_status(
        self, job_id: str, applicant_id: str, data: dict[str, Any]
    ) -> ApiResult:
        return await self._client.patch(
            f"/jobs/{job_id}/applicant-status/{applicant_id}", data
        )

    async def get_recruiter_stats(self) -> ApiResult:
        return await self._client.get("/jobs/recruiter/summary")
