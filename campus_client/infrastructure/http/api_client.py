"""HTTP client for the campus backend.

Handles everything HTTP for the endpoint wrappers:
- Default headers, including the bearer credential the session manager sets
- Request execution with timeout/connection error handling
- Response status interpretation and server message extraction
- JSON parsing with shape validation
- Session invalidation on 401 (published as an event, never a redirect)

Architecture:
    - Infrastructure layer (adapter for the REST backend)
    - Uses httpx for async HTTP, one AsyncClient per request
    - Returns Result types (no exceptions for expected failures)
"""

from typing import Any

import httpx
import structlog

from campus_client.core.constants import (
    API_TIMEOUT_DEFAULT,
    AUTHORIZATION_HEADER,
    BEARER_PREFIX,
    NETWORK_ERROR_MESSAGE,
    RESPONSE_BODY_MAX_LENGTH,
)
from campus_client.core.enums import ErrorCode
from campus_client.core.result import Failure, Result, Success
from campus_client.domain.errors import (
    ApiAuthenticationError,
    ApiError,
    ApiInvalidResponseError,
    ApiNetworkError,
)
from campus_client.domain.events import SessionInvalidated
from campus_client.domain.protocols.event_bus_protocol import EventBusProtocol

type Params = dict[str, Any]

# Status → error code for statuses without a dedicated error type
_STATUS_ERROR_CODES: dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION_FAILED,
    404: ErrorCode.RESOURCE_NOT_FOUND,
    409: ErrorCode.RESOURCE_CONFLICT,
    422: ErrorCode.VALIDATION_FAILED,
    429: ErrorCode.API_RATE_LIMITED,
}


def clean_params(params: Params | None) -> Params | None:
    """Drop query parameters that are None or empty strings.

    Args:
        params: Raw query parameters (filters straight from a form).

    Returns:
        Parameters worth sending, or None when nothing is left.
    """
    if not params:
        return None
    cleaned = {
        key: value for key, value in params.items() if value is not None and value != ""
    }
    return cleaned or None


def build_multipart(
    form_data: dict[str, str] | None,
    files: dict[str, Any] | None,
) -> dict[str, Any] | None:
    """Merge text fields and file parts into one multipart mapping.

    Text fields become `(None, value)` parts so the body is sent as
    multipart/form-data even when no file is attached.
    """
    if form_data is None and not files:
        return None
    parts: dict[str, Any] = {
        key: (None, str(value)) for key, value in (form_data or {}).items()
    }
    parts.update(files or {})
    return parts


class CampusApiClient:
    """Async HTTP client with a shared default Authorization header.

    The session manager is the only writer of the bearer header
    (`set_bearer_token` / `clear_bearer_token`); every request made through
    this client carries whatever is set at the moment it is sent.

    A 401 on a request made with `invalidate_session=True` (the default)
    publishes SessionInvalidated on the event bus. Auth endpoints opt out,
    since a 401 there is a rejected login, not an expired session.

    Attributes:
        _base_url: Backend API base URL (without trailing slash).
        _timeout: HTTP request timeout in seconds.
        _event_bus: Bus receiving SessionInvalidated (optional).

    Example:
        >>> client = CampusApiClient(base_url="http://localhost:5000/api")
        >>> client.set_bearer_token("abc123")
        >>> result = await client.get("/jobs", params={"page": 1})
        >>> match result:
        ...     case Success(value=body):
        ...         print(body["data"])
        ...     case Failure(error=error):
        ...         print(describe_error(error))
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = API_TIMEOUT_DEFAULT,
        event_bus: EventBusProtocol | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Backend API base URL (e.g., "http://localhost:5000/api").
            timeout: HTTP request timeout in seconds.
            event_bus: Receives SessionInvalidated on 401 responses.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._event_bus = event_bus
        self._default_headers: dict[str, str] = {"Accept": "application/json"}
        self._logger = structlog.get_logger("campus_api")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def default_headers(self) -> dict[str, str]:
        """Copy of the headers sent with every request."""
        return dict(self._default_headers)

    @property
    def bearer_token(self) -> str | None:
        """Token currently sent in the Authorization header, if any."""
        header = self._default_headers.get(AUTHORIZATION_HEADER)
        if header is None:
            return None
        return header.removeprefix(BEARER_PREFIX)

    def set_bearer_token(self, token: str) -> None:
        """Send `Authorization: Bearer <token>` with every request.

        Raises:
            ValueError: If token is empty.
        """
        if not token:
            raise ValueError("Bearer token cannot be empty")
        self._default_headers[AUTHORIZATION_HEADER] = f"{BEARER_PREFIX}{token}"

    def clear_bearer_token(self) -> None:
        """Stop sending the Authorization header. Idempotent."""
        self._default_headers.pop(AUTHORIZATION_HEADER, None)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Params | None = None,
        json_data: Any = None,
        form_data: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
        invalidate_session: bool = True,
        operation: str | None = None,
    ) -> Result[dict[str, Any], ApiError]:
        """Execute a request and parse the JSON object body.

        Args:
            method: HTTP method (GET, POST, ...).
            path: URL path relative to base_url.
            params: Query parameters (None/empty values dropped).
            json_data: JSON body.
            form_data: Multipart text fields.
            files: Multipart file parts (httpx `files` mapping).
            invalidate_session: Publish SessionInvalidated on 401.
            operation: Operation name for logging (defaults to "METHOD path").

        Returns:
            Success(dict): Parsed JSON object (empty dict for 204).
            Failure(ApiError): On any error status, network failure or bad body.
        """
        operation = operation or f"{method.upper()} {path}"
        url = f"{self._base_url}{path}"
        multipart = build_multipart(form_data, files)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method.upper(),
                    url=url,
                    headers=self.default_headers,
                    params=clean_params(params),
                    json=json_data,
                    files=multipart,
                )

        except httpx.TimeoutException as e:
            self._logger.warning(
                "campus_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ApiNetworkError(
                    code=ErrorCode.NETWORK_ERROR,
                    message=NETWORK_ERROR_MESSAGE,
                    details={"operation": operation, "reason": "timeout"},
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                "campus_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ApiNetworkError(
                    code=ErrorCode.NETWORK_ERROR,
                    message=NETWORK_ERROR_MESSAGE,
                    details={"operation": operation, "reason": str(e)},
                )
            )

        if response.status_code == 401 and invalidate_session:
            await self._publish_invalidation(path)

        return self._parse_json_object(response, operation)

    async def get(
        self, path: str, *, params: Params | None = None
    ) -> Result[dict[str, Any], ApiError]:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json_data: Any = None,
        *,
        form_data: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> Result[dict[str, Any], ApiError]:
        return await self.request(
            "POST", path, json_data=json_data, form_data=form_data, files=files
        )

    async def put(self, path: str, json_data: Any = None) -> Result[dict[str, Any], ApiError]:
        return await self.request("PUT", path, json_data=json_data)

    async def patch(
        self, path: str, json_data: Any = None
    ) -> Result[dict[str, Any], ApiError]:
        return await self.request("PATCH", path, json_data=json_data)

    async def delete(self, path: str) -> Result[dict[str, Any], ApiError]:
        return await self.request("DELETE", path)

    async def _publish_invalidation(self, path: str) -> None:
        self._logger.warning("campus_api_unauthorized", path=path)
        if self._event_bus is not None:
            await self._event_bus.publish(SessionInvalidated(path=path, status_code=401))

    def _server_message(self, response: httpx.Response) -> str | None:
        """Pull `message` out of an error body, if it is JSON and has one."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            message = body.get("message")
            if isinstance(message, str) and message:
                return message
        return None

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[ApiError] | None:
        """Map an error status to an ApiError.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(ApiError) if error detected, None for 2xx.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        server_message = self._server_message(response)
        details = {
            "operation": operation,
            "response_body": response.text[:RESPONSE_BODY_MAX_LENGTH],
        }

        if status in (401, 403):
            self._logger.warning(
                "campus_api_auth_rejected",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=ApiAuthenticationError(
                    code=ErrorCode.TOKEN_INVALID
                    if status == 401
                    else ErrorCode.PERMISSION_DENIED,
                    message=server_message
                    or ("Not authorized" if status == 401 else "Access denied"),
                    status_code=status,
                    server_message=server_message,
                    is_token_expired=status == 401,
                    details=details,
                )
            )

        if status >= 500:
            self._logger.warning(
                "campus_api_server_error",
                operation=operation,
                status_code=status,
            )
            code = ErrorCode.API_UNAVAILABLE
        else:
            self._logger.info(
                "campus_api_request_rejected",
                operation=operation,
                status_code=status,
            )
            code = _STATUS_ERROR_CODES.get(status, ErrorCode.API_REQUEST_FAILED)

        return Failure(
            error=ApiError(
                code=code,
                message=server_message or f"Request failed with status {status}",
                status_code=status,
                server_message=server_message,
                details=details,
            )
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], ApiError]:
        """Parse response as JSON object with error handling.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(ApiError): On HTTP error or invalid JSON.
        """
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        if response.status_code == 204 or not response.content:
            return Success(value={})

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                "campus_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ApiInvalidResponseError(
                    code=ErrorCode.API_INVALID_RESPONSE,
                    message="Invalid JSON response from server",
                    status_code=response.status_code,
                    details={"response_body": response.text[:RESPONSE_BODY_MAX_LENGTH]},
                )
            )

        if not isinstance(data, dict):
            self._logger.warning(
                "campus_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=ApiInvalidResponseError(
                    code=ErrorCode.API_INVALID_RESPONSE,
                    message="Expected object response from server",
                    status_code=response.status_code,
                    details={"response_body": response.text[:RESPONSE_BODY_MAX_LENGTH]},
                )
            )

        self._logger.debug(
            "campus_api_succeeded",
            operation=operation,
            status_code=response.status_code,
        )
        return Success(value=data)
