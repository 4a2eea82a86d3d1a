"""Ports the session manager uses to reach the backend.

Two seams:
    - AuthGatewayProtocol: the auth endpoints (`/login`, `/register`, `/me`)
    - BearerHeaderProtocol: the HTTP client's default Authorization header

Implementations:
    - AuthAPI: campus_client/infrastructure/api/auth_api.py
    - CampusApiClient: campus_client/infrastructure/http/api_client.py
"""

from dataclasses import dataclass
from typing import Any, Protocol

from campus_client.core.result import Result
from campus_client.domain.errors import ApiError

# (filename, content, content_type) - the shape httpx accepts for a file part
type UploadFile = tuple[str, bytes, str]


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthPayload:
    """Unwrapped `data` block of a login/registration response.

    Attributes:
        user: Raw user object (None when registration issued no session).
        token: Bearer token (None when registration issued no session).
        message: Backend's success message, if any.
    """

    user: dict[str, Any] | None = None
    token: str | None = None
    message: str | None = None

    @property
    def has_session(self) -> bool:
        """True when both a user and a token came back."""
        return self.user is not None and bool(self.token)


class AuthGatewayProtocol(Protocol):
    """Backend authentication endpoints."""

    async def login(self, email: str, password: str) -> Result[AuthPayload, ApiError]:
        """`POST /login` with a JSON body.

        Returns:
            Success(AuthPayload) carrying user and token.
            Failure(ApiError) on rejection, network failure or bad shape.
        """
        ...

    async def register(
        self,
        fields: dict[str, str],
        files: dict[str, UploadFile] | None = None,
    ) -> Result[AuthPayload, ApiError]:
        """`POST /register` with a multipart body.

        Args:
            fields: Form fields (name, email, password, role, role extras).
            files: Optional file parts keyed by form field name.

        Returns:
            Success(AuthPayload) with user and token for accounts that may log
            in immediately, or only a message for accounts awaiting
            verification.
            Failure(ApiError) on rejection or network failure.
        """
        ...

    async def get_current_user(self) -> Result[dict[str, Any], ApiError]:
        """`GET /me` using the client's current Authorization header.

        Returns:
            Success(dict) with the user object.
            Failure(ApiError) when the token is rejected or unreachable.
        """
        ...


class BearerHeaderProtocol(Protocol):
    """Default Authorization header of the HTTP client."""

    @property
    def bearer_token(self) -> str | None:
        """Token currently sent with every request, if any."""
        ...

    def set_bearer_token(self, token: str) -> None:
        """Send `Authorization: Bearer <token>` with every request."""
        ...

    def clear_bearer_token(self) -> None:
        """Stop sending the Authorization header."""
        ...
