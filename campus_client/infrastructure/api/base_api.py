"""Shared base for the resource endpoint wrappers.

Each wrapper is a thin layer over CampusApiClient: it builds the path and
body, and returns the client's Result untouched. Mapping to domain types is
left to callers.
"""

from typing import Any

from campus_client.core.result import Result
from campus_client.domain.errors import ApiError
from campus_client.infrastructure.http.api_client import CampusApiClient

type ApiResult = Result[dict[str, Any], ApiError]


class BaseResourceAPI:
    """Holds the shared HTTP client.

    Attributes:
        _client: Shared HTTP client (carries the bearer header).
    """

    def __init__(self, client: CampusApiClient) -> None:
        self._client = client
