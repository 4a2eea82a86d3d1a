"""Client-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError values returned through Result types.

Categories:
- Validation errors (VALIDATION_*)
- Authentication errors (TOKEN_*)
- Authorization errors (PERMISSION_*)
- Resource errors (*_NOT_FOUND, *_CONFLICT)
- Transport errors (API_*, NETWORK_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Client-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Authentication errors
    TOKEN_INVALID = "token_invalid"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"

    # Resource errors
    RESOURCE_NOT_FOUND = "resource_not_found"
    RESOURCE_CONFLICT = "resource_conflict"

    # Transport errors
    API_RATE_LIMITED = "api_rate_limited"
    API_UNAVAILABLE = "api_unavailable"
    API_INVALID_RESPONSE = "api_invalid_response"
    API_REQUEST_FAILED = "api_request_failed"
    NETWORK_ERROR = "network_error"
