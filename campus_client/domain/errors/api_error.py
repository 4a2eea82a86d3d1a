"""API error types returned by the HTTP client.

These errors are the failure half of every `Result` the endpoint wrappers
return. They are data, not exceptions.

Architecture:
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)
- `server_message` keeps the backend's own `message` field verbatim so forms
  can show it unchanged

Usage:
    from campus_client.domain.errors import ApiError, describe_error

    result = await api.jobs.get_job(job_id)
    if isinstance(result, Failure):
        toast(describe_error(result.error))
"""

from dataclasses import dataclass

from campus_client.core.constants import GENERIC_ERROR_MESSAGE, NETWORK_ERROR_MESSAGE
from campus_client.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiError(DomainError):
    """Backend answered with an error status.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        status_code: HTTP status, None when no response was received.
        server_message: The `message` field of the error body, if any.
        details: Additional context (path, truncated body).
    """

    status_code: int | None = None
    server_message: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiNetworkError(ApiError):
    """No response received (timeout, DNS failure, refused connection)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiAuthenticationError(ApiError):
    """Credential rejected (401) or access denied (403).

    Attributes:
        is_token_expired: True for 401, the signal to drop the session.
    """

    is_token_expired: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiInvalidResponseError(ApiError):
    """Response body was not the JSON object the client expected."""

    pass


def describe_error(error: ApiError) -> str:
    """Turn an API error into the message shown to the user.

    Order: the backend's message, then the network message when nothing
    came back, then a generic message.

    Args:
        error: Error from a failed request.

    Returns:
        User-facing message.
    """
    if error.server_message:
        return error.server_message
    if isinstance(error, ApiNetworkError):
        return NETWORK_ERROR_MESSAGE
    return GENERIC_ERROR_MESSAGE
