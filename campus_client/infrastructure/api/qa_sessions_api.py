"""Q&A sessions API (mock interview questions attached to jobs).

Endpoints:
    POST  /qa-sessions/create
    GET   /qa-sessions/{id}
    PATCH /qa-sessions/{id}/mark-completed
    GET   /qa-sessions/student/{id}
    GET   /qa-sessions
    POST  /qa-sessions/{id}/answers
    GET   /qa-sessions/job/{jobId}
    GET   /qa-sessions/recruiter/sessions
"""

from typing import Any

from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class QASessionsAPI(BaseResourceAPI):
    async def create(self, data: dict[str, Any]) -> ApiResult:
        return await self._client.post("/qa-sessions/create", data)

    async def get_by_id(self, session_id: str) -> ApiResult:
        return await self._client.get(f"/qa-sessions/{session_id}")

    async def mark_completed(self, session_id: str) -> ApiResult:
        return await self._client.patch(f"/qa-sessions/{session_id}/mark-completed")

    async def get_student_status(self, session_id: str) -> ApiResult:
        return await self._client.get(f"/qa-sessions/student/{session_id}")

    async def list(self) -> ApiResult:
        return await self._client.get("/qa-sessions")

    async def submit_answers(self, session_id: str, data: dict[str, Any]) -> ApiResult:
        return await self._client.post(f"/qa-sessions/{session_id}/answers", data)

    async def get_job_qa_sessions(self, job_id: str) -> ApiResult:
        return await self._client.get(f"/qa-sessions/job/{job_id}")

    async def get_recruiter_qa_sessions(self) -> ApiResult:
        return await self._client.get("/qa-sessions/recruiter/sessions")
