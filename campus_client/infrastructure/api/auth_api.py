"""Campus auth API client.

Endpoints (relative to the auth prefix, `/auth` by default):
    POST /login - JSON credentials, returns `data.{user, token}`
    POST /register - multipart form (optional ID card), returns
        `data.{user, token}` or only a message
    POST /forgot-password - JSON `{email}`
    POST /reset-password - JSON `{token, password}`
    GET  /verify-email - query `{email, role, bracuId}`
    GET  /me - current user for the Authorization header

None of these requests publish SessionInvalidated: a 401 here is a rejected
login or a dead stored token, both handled by the session manager itself.
"""

from typing import Any

import structlog

from campus_client.core.enums import ErrorCode
from campus_client.core.result import Failure, Result, Success
from campus_client.domain.errors import ApiError, ApiInvalidResponseError
from campus_client.domain.protocols.auth_gateway_protocol import (
    AuthPayload,
    UploadFile,
)
from campus_client.infrastructure.http.api_client import CampusApiClient

logger = structlog.get_logger(__name__)


class AuthAPI:
    """Auth endpoints over the shared CampusApiClient.

    Satisfies AuthGatewayProtocol (`login`, `register`, `get_current_user`).

    Attributes:
        _client: Shared HTTP client (carries the bearer header).
        _prefix: Path prefix of the auth routes.
    """

    def __init__(self, client: CampusApiClient, *, prefix: str = "/auth") -> None:
        self._client = client
        self._prefix = prefix.rstrip("/")

    async def login(self, email: str, password: str) -> Result[AuthPayload, ApiError]:
        """Exchange credentials for a user and token.

        Args:
            email: Account email.
            password: Account password.

        Returns:
            Success(AuthPayload): With both user and token.
            Failure(ApiError): Rejected credentials, network failure, or a
                success body missing user/token.
        """
        result = await self._client.request(
            "POST",
            f"{self._prefix}/login",
            json_data={"email": email, "password": password},
            invalidate_session=False,
            operation="login",
        )
        if isinstance(result, Failure):
            return result

        payload = self._unwrap_auth_payload(result.value)
        if not payload.has_session:
            logger.warning("auth_login_missing_session", keys=sorted(result.value))
            return Failure(
                error=ApiInvalidResponseError(
                    code=ErrorCode.API_INVALID_RESPONSE,
                    message="Login response missing user or token",
                    status_code=200,
                )
            )
        return Success(value=payload)

    async def register(
        self,
        fields: dict[str, str],
        files: dict[str, UploadFile] | None = None,
    ) -> Result[AuthPayload, ApiError]:
        """Create an account with a multipart form.

        Args:
            fields: Text fields of the registration form.
            files: File parts (the ID card), keyed by form field name.

        Returns:
            Success(AuthPayload): User and token when the backend opened a
                session, otherwise only the message.
            Failure(ApiError): Rejected form or network failure.
        """
        result = await self._client.request(
            "POST",
            f"{self._prefix}/register",
            form_data=fields,
            files=files,
            invalidate_session=False,
            operation="register",
        )
        if isinstance(result, Failure):
            return result
        return Success(value=self._unwrap_auth_payload(result.value))

    async def get_current_user(self) -> Result[dict[str, Any], ApiError]:
        """Fetch the user the current bearer token belongs to.

        Returns:
            Success(dict): The `data.user` object.
            Failure(ApiError): Token rejected, unreachable, or no user object.
        """
        result = await self._client.request(
            "GET",
            f"{self._prefix}/me",
            invalidate_session=False,
            operation="get_current_user",
        )
        if isinstance(result, Failure):
            return result

        data = result.value.get("data")
        user = data.get("user") if isinstance(data, dict) else None
        if not isinstance(user, dict):
            return Failure(
                error=ApiInvalidResponseError(
                    code=ErrorCode.API_INVALID_RESPONSE,
                    message="Current user response missing user",
                    status_code=200,
                )
            )
        return Success(value=user)

    async def forgot_password(self, email: str) -> Result[dict[str, Any], ApiError]:
        return await self._client.request(
            "POST",
            f"{self._prefix}/forgot-password",
            json_data={"email": email},
            invalidate_session=False,
        )

    async def reset_password(
        self, token: str, password: str
    ) -> Result[dict[str, Any], ApiError]:
        return await self._client.request(
            "POST",
            f"{self._prefix}/reset-password",
            json_data={"token": token, "password": password},
            invalidate_session=False,
        )

    async def verify_email(
        self,
        email: str,
        role: str | None = None,
        bracu_id: str | None = None,
    ) -> Result[dict[str, Any], ApiError]:
        """Check an email is free (and, by role, acceptable) before registering."""
        return await self._client.request(
            "GET",
            f"{self._prefix}/verify-email",
            params={"email": email, "role": role, "bracuId": bracu_id},
            invalidate_session=False,
        )

    @staticmethod
    def _unwrap_auth_payload(body: dict[str, Any]) -> AuthPayload:
        data = body.get("data")
        data = data if isinstance(data, dict) else {}
        user = data.get("user")
        token = data.get("token")
        message = body.get("message")
        return AuthPayload(
            user=user if isinstance(user, dict) else None,
            token=token if isinstance(token, str) and token else None,
            message=message if isinstance(message, str) else None,
        )
