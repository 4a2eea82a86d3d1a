"""Centralized constants for internal implementation details.

Constants here are fixed behavior of the client, NOT environment-specific
configuration. For environment-specific settings use
`campus_client.core.config` instead.

Example:
    >>> from campus_client.core.constants import BEARER_PREFIX
    >>> header = f"{BEARER_PREFIX}{token}"
"""

# =============================================================================
# Timeouts
# =============================================================================

API_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for backend API calls in seconds."""


# =============================================================================
# Headers and storage
# =============================================================================

AUTHORIZATION_HEADER: str = "Authorization"
"""Header carrying the bearer credential."""

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""

TOKEN_STORAGE_KEY_DEFAULT: str = "token"
"""Well-known key the bearer token is persisted under."""


# =============================================================================
# User-facing messages
# =============================================================================

NETWORK_ERROR_MESSAGE: str = "Network error. Please check your connection."
"""Shown when a request got no response at all."""

GENERIC_ERROR_MESSAGE: str = "An error occurred"
"""Shown when the backend rejected a request without a message."""

LOGIN_FAILED_MESSAGE: str = "Login failed"
"""Fallback when a login attempt fails without a server message."""

REGISTRATION_FAILED_MESSAGE: str = "Registration failed"
"""Fallback when a registration attempt fails without a server message."""

SUPERSEDED_MESSAGE: str = "Authentication superseded"
"""Returned by an attempt whose result was discarded after a later logout."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum response body length kept in error details."""


# =============================================================================
# Course access
# =============================================================================

COURSE_ACCESS_MONTHS: int = 6
"""Months a course enrollment stays accessible."""
