"""Domain errors package.

Usage:
    from campus_client.domain.errors import ApiError, ApiNetworkError
"""

from campus_client.domain.errors.api_error import (
    ApiAuthenticationError,
    ApiError,
    ApiInvalidResponseError,
    ApiNetworkError,
    describe_error,
)

__all__ = [
    "ApiAuthenticationError",
    "ApiError",
    "ApiInvalidResponseError",
    "ApiNetworkError",
    "describe_error",
]
