"""Resume API.

Endpoints:
    POST /resume/generate - build a resume from the caller's profile
"""

from campus_client.infrastructure.api.base_api import ApiResult, BaseResourceAPI


class ResumeAPI(BaseResourceAPI):
    async def generate(self) -> ApiResult:
        return await self._client.post("/resume/generate")
